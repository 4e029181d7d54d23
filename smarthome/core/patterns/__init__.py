from .observer import DeviceObserver, DeviceSubject, DeviceChangeRecorder

__all__ = ["DeviceObserver", "DeviceSubject", "DeviceChangeRecorder"]
