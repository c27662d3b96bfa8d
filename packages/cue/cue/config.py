"""Presentation configuration dataclass."""
from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from cue.types import ConfigError

STAGE_NAMES = (
    "name",
    "greeting",
    "message",
    "hold",
    "decoration",
    "reveal_subject",
    "reveal_scene",
    "card_zoom",
)


def _default_settle() -> Mapping[str, float]:
    return MappingProxyType(
        dict(zip(STAGE_NAMES, (500.0, 400.0, 400.0, 500.0, 600.0, 700.0, 1200.0, 900.0)))
    )


@dataclass(frozen=True)
class PresentationConfig:
    """Immutable literals for one presentation run.

    Attributes:
        name_text, greeting_text, message_text, decoration_text: Lines typed
            into sinks 1-4.
        message_typo: Prefix typed before the correction beat; kept as data
            rather than derived from ``message_text``.
        *_char_ms: Per-character typing delays.
        settle_ms: Read-only post-stage settle delay keyed by stage name;
            left out of the hash.
        subject_url, background_url, photo_urls: Asset URLs for the loader.
        spin_per_frame: Radians added to the visible subject's y rotation
            each frame.
        fps: Frame clock rate.
    """

    name_text: str = "tina"
    greeting_text: str = "today is your birthday"
    message_typo: str = "so i made you this c"
    message_text: str = "so i made you this computer program"
    decoration_text: str = "(0, 0), |__/(0, 0),|"

    name_char_ms: float = 80.0
    greeting_char_ms: float = 60.0
    typo_char_ms: float = 40.0
    typo_pause_ms: float = 300.0
    message_char_ms: float = 30.0
    decoration_char_ms: float = 35.0

    settle_ms: Mapping[str, float] = field(default_factory=_default_settle, hash=False)

    text_fade_ms: float = 600.0
    text_fade_wait_ms: float = 650.0
    subject_position: tuple[float, float, float] = (0.0, -0.15, 0.0)
    subject_pop_from: float = 0.6
    subject_pop_ms: float = 700.0

    caption_delay_ms: float = 80.0
    caption_fade_ms: float = 800.0
    camera_target: tuple[float, float, float] = (0.0, 3.2, 10.0)
    camera_pan_ms: float = 900.0

    card_delay_ms: float = 50.0
    card_from_scale: float = 0.7
    card_to_scale: float = 1.12
    card_scale_ms: float = 900.0
    card_fade_ms: float = 600.0
    subject_drop_y: float = -0.6
    subject_drop_ms: float = 900.0
    card_hold_ms: float = 1100.0

    subject_url: str = "assets/cake.glb"
    background_url: str = "assets/city.jpg"
    photo_urls: tuple[str, ...] = (
        "assets/photo1.jpg",
        "assets/photo2.jpg",
        "assets/photo3.jpg",
    )

    spin_per_frame: float = 0.007
    fps: float = 60.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PresentationConfig:
        """Overlay ``data`` on the defaults. Unknown keys raise ConfigError."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        defaults = cls()
        values = {
            key: _coerce(key, raw, getattr(defaults, key)) for key, raw in data.items()
        }
        config = replace(defaults, **values)
        if config.fps <= 0:
            raise ConfigError("fps must be positive")
        return config


def load_config(path: str | Path) -> PresentationConfig:
    """Read a JSON object from ``path`` and build a PresentationConfig."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return PresentationConfig.from_dict(data)


def _coerce(key: str, raw: Any, default: Any) -> Any:
    if isinstance(default, str):
        if not isinstance(raw, str):
            raise ConfigError(f"{key}: expected a string, got {raw!r}")
        return raw

    if isinstance(default, float):
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ConfigError(f"{key}: expected a number, got {raw!r}")
        return float(raw)

    if isinstance(default, tuple):
        if not isinstance(raw, (list, tuple)):
            raise ConfigError(f"{key}: expected a list, got {raw!r}")
        if default and len(raw) != len(default) and not isinstance(default[0], str):
            raise ConfigError(f"{key}: expected {len(default)} values, got {len(raw)}")
        template = default[0] if default else raw[0] if raw else None
        return tuple(_coerce(key, item, template) for item in raw)

    if isinstance(default, Mapping):
        if not isinstance(raw, Mapping):
            raise ConfigError(f"{key}: expected an object, got {raw!r}")
        unknown = sorted(set(raw) - set(default))
        if unknown:
            raise ConfigError(f"{key}: unknown entries {', '.join(unknown)}")
        merged = dict(default)
        for name, value in raw.items():
            merged[name] = _coerce(f"{key}.{name}", value, default[name])
        return MappingProxyType(merged)

    return raw
