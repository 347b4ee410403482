from .polygon import (
    Point,
    Polygon,
    distance,
    close_polygon,
    point_in_polygon,
    polygon_bounds,
    polygon_area,
)
