"""School input record for the campuscost engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from campuscost.models.enums import SchoolType, TuitionTier


class SchoolRecord(BaseModel):
    """Raw per-school financial record.

    This is the primary input to the engine: enrollment and capacity, the
    year-end actual cost line items, and the per-student figures from the
    approved financial model. Records are immutable once loaded.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    school_id: str = Field(min_length=1)
    name: str
    school_type: SchoolType
    tuition_tier: TuitionTier
    tuition: float = Field(ge=0)
    current_enrollment: int = Field(ge=0)
    capacity: int = Field(gt=0)
    sqft: float = Field(ge=0, default=0.0)

    # Year-end actual cost line items
    lease: float = Field(ge=0, default=0.0)
    utilities: float = Field(ge=0, default=0.0)
    repairs: float = Field(ge=0, default=0.0)
    it_maintenance: float = Field(ge=0, default=0.0)
    security: float = Field(ge=0, default=0.0)
    landscaping: float = Field(ge=0, default=0.0)
    janitorial: float = Field(ge=0, default=0.0)
    food_services: float = Field(ge=0, default=0.0)
    transportation: float = Field(ge=0, default=0.0)
    capex_buildout: float = Field(ge=0, default=0.0)
    total_excluding_capex: float = Field(ge=0, default=0.0)
    total_including_capex: float = Field(ge=0, default=0.0)

    # Approved-model budget, per student
    model_facilities_per_student: float = Field(ge=0, default=0.0)
    model_capex_per_student: float = Field(ge=0, default=0.0)

    @property
    def model_total_per_student(self) -> float:
        return self.model_facilities_per_student + self.model_capex_per_student

    @property
    def is_operating(self) -> bool:
        return self.current_enrollment > 0

    @property
    def is_over_capacity(self) -> bool:
        return self.current_enrollment > self.capacity
