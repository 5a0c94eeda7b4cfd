from pydantic import BaseModel, ConfigDict, Field

from finlens.domain.models import CohortStrength, StrengthStatus


class _CohortStrengthSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    strength: float
    avg_change: float = Field(alias="avgChange")
    ad_ratio: float = Field(alias="adRatio")
    total_stocks: int = Field(alias="totalStocks")
    advancers: int
    decliners: int
    status: StrengthStatus


class LayerStrengthSchema(_CohortStrengthSchema):
    layer: str

    @classmethod
    def from_domain(cls, result: CohortStrength) -> "LayerStrengthSchema":
        return cls(layer=result.cohort_key, **_metrics(result))


class SectorStrengthSchema(_CohortStrengthSchema):
    sector: str

    @classmethod
    def from_domain(cls, result: CohortStrength) -> "SectorStrengthSchema":
        return cls(sector=result.cohort_key, **_metrics(result))


def _metrics(result: CohortStrength) -> dict:
    return {
        "strength": float(result.strength),
        "avg_change": float(result.avg_change),
        "ad_ratio": float(result.ad_ratio),
        "total_stocks": result.total_stocks,
        "advancers": result.advancers,
        "decliners": result.decliners,
        "status": result.status,
    }


class LayerStrengthResponse(BaseModel):
    success: bool = True
    data: LayerStrengthSchema


class SectorStrengthResponse(BaseModel):
    success: bool = True
    data: SectorStrengthSchema
