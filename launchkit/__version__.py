__title__ = "launchkit"
__description__ = "Host-environment primitives for short-lived command-line launchers."
__url__ = "https://github.com/launchkit/launchkit"
__version__ = "0.3.0"
__license__ = "Apache-2.0"
__intro__ = f"{__title__} {__version__}"
