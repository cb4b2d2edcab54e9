from healthcare_records.compute.matcher import closest_match, mean_squared_error

__all__ = ["closest_match", "mean_squared_error"]
