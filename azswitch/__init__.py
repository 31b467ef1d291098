"""AZSwitch — type QWERTY text on an AZERTY keyboard."""

__version__ = '1.0.0'
