from fastapi import FastAPI
from pydantic import BaseModel, Field

from pizza_agent.estimator import EstimationRequest, calculate_pizza_for_people, estimate

app = FastAPI(title="Contoso Pizza calculator")


class PizzaRequest(BaseModel):
    people_count: int = Field(ge=1)
    appetite_level: str = "average"

    def to_estimation(self) -> EstimationRequest:
        return EstimationRequest(party_size=self.people_count, appetite=self.appetite_level)


class PizzaResponse(BaseModel):
    pizzas_needed: int
    recommendation: str


@app.post("/calculate_pizza", response_model=PizzaResponse)
def calculate_pizza(req: PizzaRequest):
    result = estimate(req.to_estimation())
    return PizzaResponse(
        pizzas_needed=result.pizzas_needed,
        recommendation=calculate_pizza_for_people(req.people_count, req.appetite_level),
    )
