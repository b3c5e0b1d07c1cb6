"""Android SDK integration: SDK location and aapt command assembly."""

from src.android.sdk import AndroidSdk

__all__ = ["AndroidSdk"]
