"""
Basic example of using the coordinate value type.
"""

from gpscoords import Coordinate
from gpscoords.unit import Degree, Kilometer


def main():
    print("=" * 80)
    print("gpscoords - Basic Example")
    print("=" * 80)

    london = Coordinate(51.5074, -0.1278)
    paris = Coordinate.from_wkt("POINT (2.3522 48.8566)")
    print(f"\nLondon: {london}")
    print(f"Paris:  {paris}")

    # Distances
    print("\n" + "-" * 80)
    print("Distance and bearing")
    print(f"Haversine distance: {london.distance_to(paris).to(Kilometer):.1f} km")
    print(f"WGS84 distance:     {london.geodesic_distance_to(paris).to(Kilometer):.1f} km")
    print(f"Initial bearing:    {london.bearing_to(paris).to(Degree):.1f} deg")

    halfway = london.forward(london.bearing_to(paris), london.geodesic_distance_to(paris) / 2)
    print(f"Halfway point:      {halfway}")

    # Codecs
    print("\n" + "-" * 80)
    print("Encodings")
    print(f"WKT: {paris.to_wkt()}")
    print(f"WKB: {paris.to_wkb().hex()}")

    # Invalid input
    print("\n" + "-" * 80)
    print("Invalid input")
    for text in ["", "POINT EMPTY", "POINT (200 10)", "51.5,-0.12"]:
        ok, coord = Coordinate.try_parse(text)
        print(f"{text!r:>20} -> ok={ok} finite={coord.is_finite} wkt={coord.to_wkt()}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
