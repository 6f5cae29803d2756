"""Pydantic schemas for the slice engine service."""

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from pkgs.hyperbolic import DEFAULT_REFRESH, HyperbolicSpace, Precision


class IntervalConfig(BaseModel):
    """Closed interval [lower, upper]."""
    lower: float = 0.0
    upper: float = 1.0

    def bounds(self) -> Tuple[float, float]:
        return (self.lower, self.upper)


class RegionConfig(BaseModel):
    """Complex region: an interval for the real part and one for the imaginary part."""
    real: IntervalConfig = Field(default_factory=IntervalConfig)
    imag: IntervalConfig = Field(default_factory=IntervalConfig)


class SpaceConfig(BaseModel):
    """Bounding space of a slice. Missing zeta regions default to the unit square."""
    dimension: int = Field(2, ge=1)
    zetas: List[RegionConfig] = Field(default_factory=list)
    r: IntervalConfig = Field(default_factory=IntervalConfig)
    height: IntervalConfig = Field(default_factory=IntervalConfig)

    @model_validator(mode='after')
    def _fill_zetas(self):
        free = self.dimension - 1
        if not self.zetas:
            self.zetas = [RegionConfig() for _ in range(free)]
        elif len(self.zetas) != free:
            raise ValueError(f"dimension {self.dimension} needs {free} zeta regions, got {len(self.zetas)}")
        return self

    def build(self, precision: Precision) -> HyperbolicSpace:
        return HyperbolicSpace.from_bounds(
            [(z.real.bounds(), z.imag.bounds()) for z in self.zetas],
            self.r.bounds(), self.height.bounds(),
            dimension=self.dimension, precision=precision
        )


class SliceRequest(BaseModel):
    """Request schema for engine initialization."""
    space: SpaceConfig = Field(default_factory=SpaceConfig)
    resolution: int = Field(8, ge=1)
    refresh: int = Field(DEFAULT_REFRESH, ge=1)
    precision_zero: float = Field(1e-10, gt=0.0)
    precision_stream: int = Field(12, ge=1)
    enable_recorder: bool = True

    def precision(self) -> Precision:
        return Precision(zero=self.precision_zero, stream=self.precision_stream)


class WalkRequest(BaseModel):
    """Request schema for a traversal walk."""
    kind: Literal['cubes', 'points'] = 'cubes'
    direction: Literal['forward', 'backward'] = 'forward'
    max_steps: Optional[int] = Field(None, ge=0)
    threshold: float = Field(1.0, gt=0.0)
    drift_interval: int = Field(1024, ge=1)
    drift_tolerance: float = Field(1e-8, gt=0.0)
    restart: bool = False


class WalkResult(BaseModel):
    """Result schema from a traversal walk."""
    success: bool
    kind: str = 'cubes'
    direction: str = 'forward'
    steps: int = 0
    start_index: int = 0
    end_index: int = 0
    finished: bool = False
    resolution: int = 0
    passed: int = 0
    failed: int = 0
    min_phi: Optional[float] = None
    max_drift: float = 0.0
    resyncs: int = 0
    elapsed: float = 0.0
    metrics: Dict[str, Any] = {}
    message: Optional[str] = None
