"""
Exceptions raised by the polyfit package.
"""


class ConfigurationError(ValueError):
    """
    Invalid samples, degree arguments or settings were supplied
    """

    pass
