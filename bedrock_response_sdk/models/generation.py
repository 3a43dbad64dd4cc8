from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Protocol, Tuple
from enum import Enum


class ModelFamily(str, Enum):
    """Model families served through Bedrock with a known response shape."""
    AI21 = "ai21"
    CLAUDE = "claude"
    COHERE = "cohere"
    TITAN = "titan"

    @classmethod
    def from_command(cls, command: Any) -> Optional["ModelFamily"]:
        """
        Resolve the family reported by a command classifier.
        
        The classifier exposes one boolean predicate per family, either
        snake_case (``is_ai21``) or camelCase (``isAi21``). Predicates are
        checked in declaration order and only an exact ``True`` counts.
        
        Returns:
            The matching family, or None when no predicate is true
        """
        for family in cls:
            for name in _PREDICATE_NAMES[family]:
                predicate = getattr(command, name, None)
                if callable(predicate) and predicate() is True:
                    return family
        return None


_PREDICATE_NAMES = {
    ModelFamily.AI21: ("is_ai21", "isAi21"),
    ModelFamily.CLAUDE: ("is_claude", "isClaude"),
    ModelFamily.COHERE: ("is_cohere", "isCohere"),
    ModelFamily.TITAN: ("is_titan", "isTitan"),
}


class BedrockCommand(Protocol):
    """Classifier describing which model family an InvokeModel call targeted."""

    def is_ai21(self) -> bool: ...

    def is_claude(self) -> bool: ...

    def is_cohere(self) -> bool: ...

    def is_titan(self) -> bool: ...


class NormalizedFields(BaseModel):
    """Fields extracted from a decoded response body."""
    model_config = ConfigDict(frozen=True)

    completions: Tuple[str, ...] = ()
    finish_reason: Optional[str] = None
    id: Optional[str] = None


class GenerationResponse(BaseModel):
    """Response model for generation."""
    text: str
    model: str
    usage: Dict[str, Any]
    provider: str
    finish_reason: Optional[str] = None
    completions: Tuple[str, ...] = Field(default_factory=tuple)
    id: Optional[str] = None
    request_id: Optional[str] = None
