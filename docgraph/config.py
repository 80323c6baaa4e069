from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Hierarchical layout settings
    layer_width: float = 300
    node_spacing: float = 120

    # Grid layout settings
    grid_spacing_x: float = 250
    grid_spacing_y: float = 150

    # Edges are animated only for graphs with at most this many nodes
    animation_threshold: int = 50

    # Web server settings
    cors_allow_origins: list[str] = ["*"]

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
