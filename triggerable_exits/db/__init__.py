from .storage import PrecompileStorage  # noqa: F401
