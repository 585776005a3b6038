"""
Visual theme and mood catalog offered by the clip wizard.

``visual_details`` is injected verbatim into storyboard prompts.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Theme:
    id: str
    name: str
    icon: str
    description: str
    visual_details: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


THEMES: tuple[Theme, ...] = (
    Theme(
        id="ethereal_light",
        name="Ethereal Light",
        icon="fa-cloud-sun",
        description="Divine, airy, and peaceful.",
        visual_details=(
            "Palette: Soft Pastels, White, Gold, Light Blue. Animation: Slow-moving "
            "clouds, light leaks, floating dust particles, soft focus blur, dreamy "
            "transitions. Mood: Hopeful, Serene."
        ),
    ),
    Theme(
        id="midnight_neon",
        name="Midnight Neon",
        icon="fa-bolt",
        description="Bold, modern, and high energy.",
        visual_details=(
            "Palette: Deep Black, Neon Blue, Magenta, Cyberpunk Purple. Animation: "
            "Glitch effects, fast cuts, glowing geometric shapes, high contrast "
            "lighting, futuristic cityscapes. Mood: Intense, Modern."
        ),
    ),
    Theme(
        id="vintage_testimony",
        name="Vintage Testimony",
        icon="fa-film",
        description="Nostalgic, warm, and authentic.",
        visual_details=(
            "Palette: Sepia, Warm Browns, Faded Film colors. Animation: 16mm film "
            "grain, projector flicker, handheld camera shake, retro textures, "
            "nostalgic atmosphere. Mood: Nostalgic, Personal."
        ),
    ),
    Theme(
        id="nature_psalm",
        name="Nature Psalm",
        icon="fa-leaf",
        description="Grounded, epic, and organic.",
        visual_details=(
            "Palette: Earth tones, Forest Green, Sky Blue, Golden Hour sunlight. "
            "Animation: Time-lapse nature, flowing water, wind in trees, majestic "
            "drone shots, cinematic realism. Mood: Majestic, Grounded."
        ),
    ),
    Theme(
        id="gritty_urban",
        name="Urban Truth",
        icon="fa-city",
        description="Raw, real, and impactful.",
        visual_details=(
            "Palette: High contrast Black & White, Concrete Grey, Asphalt. "
            "Animation: Shadow play, moody street lights, steady cam movement, noir "
            "aesthetic, dramatic lighting. Mood: Serious, Raw."
        ),
    ),
    Theme(
        id="abstract_spirit",
        name="Abstract Spirit",
        icon="fa-wind",
        description="Mystery, flow, and soul.",
        visual_details=(
            "Palette: Iridescent colors, Liquid silvers, Deep Indigo. Animation: "
            "Fluid dynamics, morphing shapes, smoke simulations, organic abstract "
            "forms, mesmerizing loops. Mood: Spiritual, Mysterious."
        ),
    ),
    Theme(
        id="paper_parable",
        name="Paper Parable",
        icon="fa-scroll",
        description="Handcrafted, textured, and simple.",
        visual_details=(
            "Palette: Kraft paper, Ink Black, Muted Primary colors. Animation: "
            "Stop-motion style, paper cutout layers, textured surfaces, handcrafted "
            "feel. Mood: Simple, Educational."
        ),
    ),
    Theme(
        id="cosmic_creation",
        name="Cosmic Creation",
        icon="fa-star",
        description="Infinite, majestic, and deep.",
        visual_details=(
            "Palette: Deep Space Blue, Nebula Purple, Starlight White. Animation: "
            "Slow galaxy rotation, shooting stars, vast scale, celestial bodies, "
            "slow cinematic zoom. Mood: Infinite, Awe-inspiring."
        ),
    ),
    Theme(
        id="animated_infographic",
        name="Animated Infographic",
        icon="fa-chart-bar",
        description="Clean, data-driven, and crisp.",
        visual_details=(
            "Palette: Minimalist White, Slate Grey, Vibrant Accent Colors. "
            "Animation: Smooth easing charts, kinetic typography elements (without "
            "readable text), geometric data flow, clean lines, modern motion "
            "graphics. Mood: Intellectual, Clear."
        ),
    ),
    Theme(
        id="abstract_geometry",
        name="Abstract Geometry",
        icon="fa-cubes",
        description="Structured, mathematical, and precise.",
        visual_details=(
            "Palette: High contrast, monochromatic with single accent. Animation: "
            "Rotating platonic solids, fractals, tessellating patterns, "
            "architectural shifts, precise mathematical movement. Mood: Orderly, "
            "Complex."
        ),
    ),
    Theme(
        id="surreal_dreamscape",
        name="Surreal Dreamscape",
        icon="fa-cloud-moon",
        description="Bizarre, dreamlike, and symbolic.",
        visual_details=(
            "Palette: Vivid, unnatural colors, deep shadows. Animation: Floating "
            "objects, melting clocks style, impossible physics, juxtapositions of "
            "nature and indoor elements, Dali-esque visuals. Mood: Dreamy, "
            "Unsettling."
        ),
    ),
)

MOODS: tuple[str, ...] = (
    "Inspiring",
    "Convicting",
    "Peaceful",
    "Intense",
    "Joyful",
    "Melancholic",
)

_THEMES_BY_ID = {theme.id: theme for theme in THEMES}


def get_theme(theme_id: str | None) -> Theme | None:
    if not theme_id:
        return None
    return _THEMES_BY_ID.get(theme_id)


def theme_ids() -> list[str]:
    return [theme.id for theme in THEMES]
