from __future__ import annotations

from pydantic import Field

from autotag.core.models.base import AppBaseModel


class ModelInfo(AppBaseModel):
    """A selectable OpenAI chat model, as offered on the settings screen."""

    id: str
    name: str
    features: tuple[str, ...] = Field(default_factory=tuple)
    context: int = Field(description="Context window size in tokens")
    input_cost_1k_tokens: float = Field(description="USD per 1000 prompt tokens")
    output_cost_1k_tokens: float = Field(description="USD per 1000 completion tokens")

    model_config = {"frozen": True}

    @property
    def supports_function_calling(self) -> bool:
        return "function-calling" in self.features


OPENAI_API_MODELS: tuple[ModelInfo, ...] = (
    ModelInfo(
        id="gpt-3.5-turbo-0613",
        name="GPT-3.5 Turbo (0613) [recommended]",
        features=("function-calling",),
        context=4000,
        input_cost_1k_tokens=0.0015,
        output_cost_1k_tokens=0.002,
    ),
    ModelInfo(
        id="gpt-3.5-turbo-16-0613",
        name="GPT-3.5 Turbo (0613) (16K context)",
        features=("function-calling",),
        context=16000,
        input_cost_1k_tokens=0.003,
        output_cost_1k_tokens=0.004,
    ),
    ModelInfo(
        id="gpt-4-0613",
        name="GPT-4 (0613)",
        features=("function-calling",),
        context=8000,
        input_cost_1k_tokens=0.03,
        output_cost_1k_tokens=0.06,
    ),
    ModelInfo(
        id="gpt-4-32k-0613",
        name="GPT-4 (0613) (32K context)",
        features=("function-calling",),
        context=32000,
        input_cost_1k_tokens=0.06,
        output_cost_1k_tokens=0.12,
    ),
)

DEFAULT_MODEL_ID = OPENAI_API_MODELS[0].id


def get_model_info(model_id: str) -> ModelInfo | None:
    """Return the catalog entry for `model_id`, or None if it is not offered."""
    for model in OPENAI_API_MODELS:
        if model.id == model_id:
            return model
    return None
