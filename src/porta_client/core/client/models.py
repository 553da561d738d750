"""
Wire models for the 3scale application management API.

The admin portal wraps every entity in a tagged envelope ("application",
"applications", "application_plan"); the models below mirror that shape so a
response body validates directly into them.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Partial update fields, sent to the server exactly as given.
Params = Dict[str, str]


class Application(BaseModel):
    """A registered API consumer belonging to an account."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = 0
    created_at: str = ""
    updated_at: str = ""
    state: str = ""
    user_account_id: str = ""
    first_traffic_at: str = ""
    first_daily_traffic_at: str = ""
    end_user_required: bool = False
    service_id: int = 0
    user_key: str = ""
    provider_verification_key: str = ""
    plan_id: int = 0
    app_name: str = Field(default="", alias="name")
    description: str = ""
    # Object in JSON bodies, text or nested element in XML ones
    extra_fields: Union[Dict[str, Any], str] = ""
    # Only set when a 2xx body reports a partial failure
    error: str = ""
    application_id: str = ""

    @model_validator(mode="before")
    @classmethod
    def _plan_id_from_nested_plan(cls, data: Any) -> Any:
        # XML documents carry the plan as <plan><id>..</id></plan>
        if isinstance(data, dict) and "plan_id" not in data:
            plan = data.get("plan")
            if isinstance(plan, dict) and "id" in plan:
                data = {**data, "plan_id": plan["id"]}
        return data

    @field_validator("user_account_id", mode="before")
    @classmethod
    def _account_id_as_string(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator(
        "created_at", "updated_at", "first_traffic_at", "first_daily_traffic_at",
        "user_key", "provider_verification_key", "extra_fields", "description",
        "error", "application_id", "state", "app_name",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("service_id", "plan_id", "end_user_required", mode="before")
    @classmethod
    def _null_as_default(cls, v: Any) -> Any:
        return 0 if v is None else v


class ApplicationElem(BaseModel):
    """The ``{"application": {...}}`` envelope."""

    application: Application


class ApplicationList(BaseModel):
    """The ``{"applications": [{"application": {...}}, ...]}`` envelope."""

    applications: List[ApplicationElem] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.applications)

    def unwrapped(self) -> List[Application]:
        """Applications in server order, without their envelopes."""
        return [elem.application for elem in self.applications]


class ApplicationPlanItem(BaseModel):
    """An application plan definition."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    system_name: str = ""
    custom: bool = False
    state: str = ""
    default: bool = False
    service_id: int = 0
    setup_fee: float = 0.0
    cost_per_month: float = 0.0
    trial_period_days: int = 0
    cancellation_period: int = 0
    approval_required: bool = False
    created_at: str = ""
    updated_at: str = ""

    @field_validator(
        "trial_period_days", "cancellation_period", "setup_fee", "cost_per_month",
        mode="before",
    )
    @classmethod
    def _null_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class ApplicationPlan(BaseModel):
    """The ``{"application_plan": {...}}`` envelope."""

    element: ApplicationPlanItem = Field(alias="application_plan")

    model_config = ConfigDict(populate_by_name=True)
