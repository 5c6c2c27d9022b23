"""Error taxonomy for a plugin run.

``SetupError`` is fatal and aborts before any fetch. Everything under
``FetchError`` and ``NoDataError`` is recovered per metric by skipping it.
"""


class CognitoIdpPluginError(Exception):
    """Base class for plugin errors."""


class SetupError(CognitoIdpPluginError):
    """Session or client construction failed."""


class FetchError(CognitoIdpPluginError):
    """A single CloudWatch request failed."""

    reason = "fetch"


class TransportError(FetchError):
    reason = "transport"


class AuthError(FetchError):
    reason = "auth"


class NoDataError(CognitoIdpPluginError):
    """The request succeeded but returned no datapoints."""

    reason = "no_data"
