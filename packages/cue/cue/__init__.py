"""cue - Sequenced, deterministic playback of a scripted 3-D presentation."""

from cue.assets import DirectoryLoader, build_fallback_subject, load_subject
from cue.clock import FrameClock, RealTime, SteppedTime
from cue.config import PresentationConfig, load_config
from cue.context import Presentation
from cue.log import setup_logging
from cue.presenter import Presenter
from cue.scene import Mesh, PerspectiveCamera, Scene, SceneNode, Texture, Vec3
from cue.stages import default_timeline
from cue.timeline import Phase, Timeline, TimelineEntry
from cue.types import AssetNotFound, ConfigError, TimelineError

__all__ = [
    "Presenter",
    "Presentation",
    "PresentationConfig",
    "load_config",
    "Timeline",
    "TimelineEntry",
    "Phase",
    "default_timeline",
    "FrameClock",
    "RealTime",
    "SteppedTime",
    "Scene",
    "SceneNode",
    "Mesh",
    "Texture",
    "Vec3",
    "PerspectiveCamera",
    "DirectoryLoader",
    "load_subject",
    "build_fallback_subject",
    "setup_logging",
    "AssetNotFound",
    "ConfigError",
    "TimelineError",
]
