"""Static catalog of selectable generation models.

Only entries marked ``available`` can be selected; the rest are listed as
coming soon.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class ModelDescriptor:
    """Catalog entry for one backend model."""
    id: str
    name: str
    description: str
    badge: str
    badge_color: str
    gradient: str
    available: bool


@dataclass(frozen=True)
class ModelCategory:
    category: str
    provider: str
    models: tuple[ModelDescriptor, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "provider": self.provider,
            "models": [asdict(m) for m in self.models],
        }


MODEL_CATEGORIES: tuple[ModelCategory, ...] = (
    ModelCategory(
        category="Replicate (FLUX) - Partially Available",
        provider="Replicate",
        models=(
            ModelDescriptor(
                id="replicate/black-forest-labs/flux-1.1-pro",
                name="FLUX 1.1 Pro",
                description="Ultra-high quality, state-of-the-art open-source model (VERIFIED WORKING)",
                badge="Ultra HD",
                badge_color="from-pink-500 to-rose-500",
                gradient="from-pink-500 to-rose-600",
                available=True,
            ),
            ModelDescriptor(
                id="replicate/black-forest-labs/flux-dev",
                name="FLUX Dev",
                description="Development version with fast generation times - Integration in progress",
                badge="Fast",
                badge_color="from-indigo-500 to-blue-500",
                gradient="from-indigo-500 to-blue-600",
                available=False,
            ),
            ModelDescriptor(
                id="replicate/black-forest-labs/flux-schnell",
                name="FLUX Schnell",
                description="Fastest FLUX variant for quick iterations - Integration in progress",
                badge="Instant",
                badge_color="from-yellow-500 to-amber-500",
                gradient="from-yellow-500 to-amber-600",
                available=False,
            ),
        ),
    ),
    ModelCategory(
        category="OpenAI (ChatGPT) - Coming Soon",
        provider="OpenAI",
        models=(
            ModelDescriptor(
                id="openai-dalle-3",
                name="DALL-E 3",
                description="Latest OpenAI model - Integration in progress",
                badge="Premium",
                badge_color="from-green-500 to-emerald-500",
                gradient="from-green-500 to-emerald-600",
                available=False,
            ),
            ModelDescriptor(
                id="openai-dalle-2",
                name="DALL-E 2",
                description="Previous generation OpenAI model - Integration in progress",
                badge="Standard",
                badge_color="from-blue-500 to-cyan-500",
                gradient="from-blue-500 to-cyan-600",
                available=False,
            ),
        ),
    ),
    ModelCategory(
        category="Google AI - Coming Soon",
        provider="Google",
        models=(
            ModelDescriptor(
                id="google-imagen-3",
                name="Imagen 3.0",
                description="Google's latest image generation model - Integration in progress",
                badge="Latest",
                badge_color="from-purple-500 to-violet-500",
                gradient="from-purple-500 to-violet-600",
                available=False,
            ),
            ModelDescriptor(
                id="google-imagen-2",
                name="Imagen 2.0",
                description="Advanced Google model - Integration in progress",
                badge="Popular",
                badge_color="from-orange-500 to-red-500",
                gradient="from-orange-500 to-red-600",
                available=False,
            ),
        ),
    ),
    ModelCategory(
        category="Stability AI - Coming Soon",
        provider="Stability AI",
        models=(
            ModelDescriptor(
                id="stability-ai/stable-diffusion-3-medium",
                name="Stable Diffusion 3 Medium",
                description="Latest Stability AI model - Integration in progress",
                badge="New",
                badge_color="from-teal-500 to-cyan-500",
                gradient="from-teal-500 to-cyan-600",
                available=False,
            ),
            ModelDescriptor(
                id="stability-ai/stable-diffusion-xl-base-1.0",
                name="SDXL Base",
                description="High resolution Stable Diffusion XL model - Integration in progress",
                badge="HD",
                badge_color="from-slate-500 to-gray-500",
                gradient="from-slate-500 to-gray-600",
                available=False,
            ),
        ),
    ),
)


def find_model(model_id: str) -> tuple[ModelDescriptor, str] | None:
    """Return the descriptor and provider for ``model_id``, or None."""
    for category in MODEL_CATEGORIES:
        for model in category.models:
            if model.id == model_id:
                return model, category.provider
    return None


def available_models() -> list[ModelDescriptor]:
    return [m for c in MODEL_CATEGORIES for m in c.models if m.available]


def catalog_as_dicts() -> list[dict[str, Any]]:
    return [c.to_dict() for c in MODEL_CATEGORIES]


class ModelSelector:
    """Controlled view over the catalog.

    Holds no state besides ``selected_model``; picking an entry only calls
    ``on_model_select`` and leaves updating ``selected_model`` to the owner.
    """

    def __init__(
        self,
        selected_model: str,
        on_model_select: Callable[[str], None],
        disabled: bool = False,
    ) -> None:
        self.selected_model = selected_model
        self.on_model_select = on_model_select
        self.disabled = disabled

    def select(self, model_id: str) -> bool:
        """
        Select a catalog entry.

        Args:
            model_id: Identifier of the entry to pick.

        Returns:
            True when the callback was invoked.
        """
        found = find_model(model_id)
        if self.disabled or found is None or not found[0].available:
            return False
        self.on_model_select(model_id)
        return True

    def selected_info(self) -> tuple[ModelDescriptor, str] | None:
        return find_model(self.selected_model)

    def render(self) -> str:
        lines = ["AI Model Selection"]
        info = self.selected_info()
        if info is not None:
            lines[0] += f" [{info[1]}]"
        for category in MODEL_CATEGORIES:
            lines.append("")
            lines.append(category.category)
            for model in category.models:
                marker = "*" if model.id == self.selected_model else " "
                tags = f"[{model.badge}]"
                if not model.available:
                    tags += " [Soon]"
                lines.append(f" {marker} {model.name} {tags} ({model.id})")
                lines.append(f"     {model.description}")
        return "\n".join(lines)
