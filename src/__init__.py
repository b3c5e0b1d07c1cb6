"""aaptcmd - command-line assembler for the Android Asset Packaging Tool."""

__version__ = "0.1.0"
