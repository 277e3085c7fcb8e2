"""Social share package turning blog posts into platform-ready social copy."""

from .config import GeneratorConfig, load_config
from .errors import EmptyContentError, FetchError
from .models import ArticleInput, CallToAction, GenerationResult, SocialPost, Tone
from .orchestrator import generate

__all__ = [
    "ArticleInput",
    "CallToAction",
    "EmptyContentError",
    "FetchError",
    "GenerationResult",
    "GeneratorConfig",
    "SocialPost",
    "Tone",
    "generate",
    "load_config",
]
