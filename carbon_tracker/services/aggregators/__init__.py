from carbon_tracker.services.aggregators.trend_aggregator import TrendAggregator

__all__ = ["TrendAggregator"]
