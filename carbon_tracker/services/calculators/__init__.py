from carbon_tracker.services.calculators.emission_calculator import EmissionCalculator

__all__ = ["EmissionCalculator"]
