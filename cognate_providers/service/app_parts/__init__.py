"""Request bodies and dependencies used by ``service.app``."""
