"""Nutrition domain models."""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class StaticEntry:
    """Baseline nutrition facts for one standard serving of a common food."""

    calories: int
    protein: int
    carbs: int
    fat: int
    explanation: str


@dataclass(frozen=True)
class NutritionEstimate:
    """Calorie and macro estimate for a meal description."""

    calories: int
    protein: int
    carbs: int
    fat: int
    explanation: str
    confidence: float
    sources: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_static(
        cls, entry: StaticEntry, confidence: float, source: str
    ) -> "NutritionEstimate":
        """Build an estimate from a static table entry."""
        return cls(
            calories=entry.calories,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            explanation=entry.explanation,
            confidence=confidence,
            sources=(source,),
        )

    def with_sources(self, sources: tuple[str, ...]) -> "NutritionEstimate":
        """Return a copy with replaced sources."""
        return replace(self, sources=tuple(sources))

    def with_confidence(self, confidence: float) -> "NutritionEstimate":
        """Return a copy with replaced confidence."""
        return replace(self, confidence=confidence)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-friendly dict."""
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "explanation": self.explanation,
            "confidence": self.confidence,
            "sources": list(self.sources),
        }


@dataclass(frozen=True)
class CacheStats:
    """Counts of response cache entries."""

    total: int
    expired: int
