from enum import Enum
from fractions import Fraction
import math

from pydantic import BaseModel, Field


class Appetite(str, Enum):
    LIGHT = "light"
    AVERAGE = "average"
    HEAVY = "heavy"


# Pizzas per person
FACTORS = {
    Appetite.LIGHT: Fraction(1, 2),
    Appetite.AVERAGE: Fraction(1),
    Appetite.HEAVY: Fraction(3, 2),
}


class EstimationRequest(BaseModel):
    party_size: int = Field(ge=1)
    appetite: str = Appetite.AVERAGE.value


class EstimationResult(BaseModel):
    pizzas_needed: int = Field(ge=1)


def normalize_appetite(appetite) -> Appetite:
    """Trimmed, case-insensitive lookup; anything unrecognized counts as average."""
    key = appetite.strip().lower() if isinstance(appetite, str) else appetite
    try:
        return Appetite(key)
    except ValueError:
        return Appetite.AVERAGE


def appetite_factor(appetite) -> Fraction:
    return FACTORS[normalize_appetite(appetite)]


def estimate_pizzas(party_size: int, appetite: str = "average") -> int:
    """Number of pizzas to order, rounded up to a whole pizza."""
    if party_size < 1:
        raise ValueError(f"party_size must be at least 1, got {party_size}")
    return math.ceil(party_size * appetite_factor(appetite))


def estimate(request: EstimationRequest) -> EstimationResult:
    return EstimationResult(pizzas_needed=estimate_pizzas(request.party_size, request.appetite))


def calculate_pizza_for_people(people_count: int, appetite_level: str = "average") -> str:
    """Recommendation text returned to the agent by the function tool."""
    pizzas = estimate_pizzas(people_count, appetite_level)
    people = "person" if people_count == 1 else "people"
    noun = "pizza" if pizzas == 1 else "pizzas"
    return f"For {people_count} {people} with {normalize_appetite(appetite_level).value} appetite, order {pizzas} {noun}."
