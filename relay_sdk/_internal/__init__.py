"""Internal modules for Relay SDK.

These modules back the public functions in ``relay_sdk.client`` and are not
intended for direct use in application code.

Modules:
    transport - Request builders, dispatcher and transports
    files - Saving and loading local files
    http - Shared HTTP client configuration
"""
