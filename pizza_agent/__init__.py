from pizza_agent.estimator import (
    Appetite,
    EstimationRequest,
    EstimationResult,
    calculate_pizza_for_people,
    estimate,
    estimate_pizzas,
)

__all__ = [
    "Appetite",
    "EstimationRequest",
    "EstimationResult",
    "calculate_pizza_for_people",
    "estimate",
    "estimate_pizzas",
]
