"""Engine-wide configuration constants."""


class Config:
    """Configuration settings shared by the whole engine."""

    #: Number of components a fresh pool is sized for.
    DEFAULT_COMPONENT_POOL_SIZE = 1000

    #: Name of the logger used throughout the engine.
    LOGGER_NAME = "low_engine_spdlog_logger_name"

    #: Sentinel used as the "no value" marker for identifiers.
    MAX_SIZE = 2**32 - 1