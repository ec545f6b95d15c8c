"""Wheel configuration: ring radii, colors and rotation physics."""

from dataclasses import dataclass, fields
from pathlib import Path

from .errors import ConfigError

# YAML keys use dashes, dataclass fields use underscores
_KEY_ALIASES = {f.replace("_", "-"): f for f in (
    "outer_radius",
    "middle_radius",
    "inner_radius",
    "inner_label_offset",
    "default_color",
    "decay",
    "stop_threshold",
    "data_file",
)}


@dataclass(frozen=True)
class WheelConfig:
    """Fixed sizing and behaviour of one wheel.

    The canvas is a square of side ``2 * outer_radius`` with the wheel centred in it.
    The three rings occupy [0, inner_radius], [inner_radius, middle_radius] and
    [middle_radius, outer_radius].
    """

    outer_radius: float = 520
    middle_radius: float = 355
    inner_radius: float = 200
    inner_label_offset: float = 7  # Percent shift of inner labels along their midline
    default_color: str = "black"
    decay: float = 0.95  # Velocity multiplier per coasting tick
    stop_threshold: float = 0.1  # Coasting stops below this |velocity|
    data_file: str = "data.json"

    def __post_init__(self) -> None:
        if not 0 < self.inner_radius < self.middle_radius < self.outer_radius:
            raise ConfigError(
                "Radii must satisfy 0 < inner-radius < middle-radius < outer-radius, got "
                f"{self.inner_radius}, {self.middle_radius}, {self.outer_radius}"
            )
        if not 0 < self.decay < 1:
            raise ConfigError(f"decay must be in (0, 1), got {self.decay}")
        if self.stop_threshold <= 0:
            raise ConfigError(f"stop-threshold must be positive, got {self.stop_threshold}")

    @property
    def center(self) -> tuple[float, float]:
        """Centre of the canvas."""
        return (self.outer_radius, self.outer_radius)

    @property
    def size(self) -> float:
        """Width and height of the canvas."""
        return self.outer_radius * 2

    @classmethod
    def from_mapping(cls, values: dict, base: "WheelConfig | None" = None) -> "WheelConfig":
        """Build a config from a mapping, starting from ``base`` (or the defaults).

        Args:
            values: Mapping of option name to value. Dashed and underscored names
                are both accepted.
            base: Config whose values are used for keys not in ``values``.

        Returns:
            New WheelConfig.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type.
        """
        base = base or cls()
        current = {f.name: getattr(base, f.name) for f in fields(cls)}
        for key, value in (values or {}).items():
            name = _KEY_ALIASES.get(key, key)
            if name not in current:
                raise ConfigError(f"Unknown config option: {key}")
            if name in ("default_color", "data_file"):
                current[name] = str(value)
            elif isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"Config option {key} must be a number, got {value!r}")
            else:
                current[name] = value
        return cls(**current)


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.

    Raises:
        ConfigError: If the file is not valid YAML or does not contain a mapping.
    """
    try:
        import yaml
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err

    with open(config_path) as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as err:
            raise ConfigError(f"{config_path} is not valid YAML: {err}") from err

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"{config_path} must contain a mapping of options")
    return config
