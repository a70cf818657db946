"""Console formatting for proximity results."""
from schemas.cities import CityWithDistance


def format_city_line(result: CityWithDistance) -> str:
    """One line per result: id, name and distance in km to 2 decimal places."""
    return f"City ID: {result.city.id}, Name: {result.city.name}, Distance: {result.distance_km:.2f} KM"
