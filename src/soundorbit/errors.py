"""Exceptions raised by the orbit engine's collaborators."""


class AudioAcquisitionError(RuntimeError):
    """The microphone could not be opened (permission denied or no device)."""
