"""
Interactive maps for forests and fires.

Builds folium (Leaflet) maps that the Streamlit views embed:
- Forest map: one tree marker per forest on a light street basemap
- Fire heatmap: brightness-weighted heat layer plus one flame marker per fire,
  on a satellite or street basemap
- Risk map: analysed point, search radius and the nearby fires found

Layers are rebuilt from the current data on every render. Fire markers carry
their coordinates so a click can be resolved back to a fire and its spread
prediction fetched on demand.
"""

import html
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import folium
import numpy as np
from folium.plugins import HeatMap
from shapely.geometry import MultiPoint, Point, box

from .forest_utils import health_color
from .i18n import Translator, format_exact_number
from .models import DayPrediction, Fire, Forest, RiskAnalysis
from .risk import risk_colors

logger = logging.getLogger(__name__)

DEFAULT_CENTER = (-9.19, -75.0152)
DEFAULT_ZOOM = 4

STREET_TILES = "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png"
SATELLITE_TILES = (
    "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}"
)
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors '
    '&copy; <a href="https://carto.com/">CARTO</a>'
)

VIEW_SATELLITE = "satellite"
VIEW_STREET = "street"

# Brightness (K) mapped to full heat intensity
HEAT_SATURATION_BRIGHTNESS = 400.0

HEAT_GRADIENT = {
    0.0: "transparent",
    0.2: "#fef3c7",
    0.4: "#fbbf24",
    0.6: "#f59e0b",
    0.8: "#f97316",
    1.0: "#ef4444",
}

TREE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 448 512" style="color: {color}">'
    '<path fill="currentColor" d="M210.6 5.9L62 169.4c-3.9 4.2-6 9.8-6 15.5C56 197.7 66.3 208 79.1 208'
    'l24.9 0L30.6 281.4c-4.2 4.2-6.6 10-6.6 16C24 309.9 34.1 320 46.6 320L80 320 5.4 409.5C1.9 413.7 0 419 '
    '0 424.5c0 13 10.5 23.5 23.5 23.5L192 448l0 32c0 17.7 14.3 32 32 32s32-14.3 32-32l0-32 168.5 0c13 0 '
    '23.5-10.5 23.5-23.5c0-5.5-1.9-10.8-5.4-15L368 320l33.4 0c12.5 0 22.6-10.1 22.6-22.6c0-6-2.4-11.8-6.6-16'
    'L344 208l24.9 0c12.7 0 23.1-10.3 23.1-23.1c0-5.7-2.1-11.3-6-15.5L237.4 5.9C234 2.1 229.1 0 224 0'
    's-10 2.1-13.4 5.9z"/></svg>'
)

FLAME_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 384 512" style="color: {color}">'
    '<path fill="currentColor" d="M216 24c0 52.9-31.1 80.4-59.6 108.2C127.9 160.6 96 192 96 256c0 70.7 '
    '57.3 128 128 128s128-57.3 128-128c0-43.6-24.8-82.4-61.8-109.2c-8.2-6.1-19.6-5.6-27.2 1.2c-7.7 6.9-9.8 '
    '18.1-5.3 27.4c5.6 11.8 8.3 24.5 8.3 38.6c0 35.3-28.7 64-64 64s-64-28.7-64-64c0-64 64-96 96-128'
    'c0-24-8-48-8-70.4c0-8.8 7.2-15.6 16-15.6s16 6.8 16 15.6z"/></svg>'
)


def _svg_icon(svg_template: str, color: str) -> folium.DivIcon:
    return folium.DivIcon(
        html=svg_template.format(color=color),
        icon_size=(25, 41),
        icon_anchor=(12.5, 41),
        popup_anchor=(0, -41),
        class_name="custom-leaflet-icon",
    )


def tree_icon(color: str = "green") -> folium.DivIcon:
    return _svg_icon(TREE_SVG, color)


def flame_icon(color: str = "orange") -> folium.DivIcon:
    return _svg_icon(FLAME_SVG, color)


def _base_map(
    center: Sequence[float],
    zoom: int,
    view_mode: str = VIEW_STREET,
    min_zoom: Optional[int] = None,
    scroll_wheel_zoom: bool = True,
) -> folium.Map:
    m = folium.Map(
        location=list(center),
        zoom_start=zoom,
        tiles=None,
        scrollWheelZoom=scroll_wheel_zoom,
    )

    tile_kwargs: Dict[str, Any] = {"subdomains": "abcd"}
    if min_zoom is not None:
        tile_kwargs["min_zoom"] = min_zoom

    if view_mode == VIEW_SATELLITE:
        folium.TileLayer(
            tiles=SATELLITE_TILES,
            attr="Esri, " + TILE_ATTRIBUTION,
            name="Satellite",
            **tile_kwargs,
        ).add_to(m)
    else:
        folium.TileLayer(
            tiles=STREET_TILES,
            attr=TILE_ATTRIBUTION,
            name="Street",
            max_zoom=20,
            **tile_kwargs,
        ).add_to(m)

    return m


def build_forest_map(
    forests: List[Forest],
    center: Sequence[float] = DEFAULT_CENTER,
    zoom: int = DEFAULT_ZOOM,
) -> folium.Map:
    """
    Create a map with one tree marker per forest.

    Markers are colored by forest health; the popup shows the forest name.
    """
    m = _base_map(center, zoom, VIEW_STREET)

    markers = folium.FeatureGroup(name="Forests", show=True)
    for forest in forests:
        folium.Marker(
            location=[forest.latitude, forest.longitude],
            icon=tree_icon(health_color(forest.health, "bar") if forest.health else "green"),
            popup=folium.Popup(html.escape(forest.name), max_width=220),
            tooltip=forest.name,
        ).add_to(markers)
    markers.add_to(m)

    logger.debug(f"Forest map built with {len(forests)} markers")
    return m


def heat_intensity(brightness: float) -> float:
    """Heat weight for a fire: brightness / 400 clipped to [0, 1]."""
    return float(np.clip((brightness or 0.0) / HEAT_SATURATION_BRIGHTNESS, 0.0, 1.0))


def heatmap_points(fires: List[Fire]) -> List[List[float]]:
    return [[f.latitude, f.longitude, heat_intensity(f.brightness)] for f in fires]


def build_fire_heatmap(
    fires: List[Fire],
    center: Sequence[float] = DEFAULT_CENTER,
    zoom: int = DEFAULT_ZOOM,
    radius: int = 30,
    view_mode: str = VIEW_SATELLITE,
    translator: Optional[Translator] = None,
) -> folium.Map:
    """
    Create the fire heatmap.

    Args:
        fires: Fire detections to plot
        center: Map center (lat, lon)
        zoom: Initial zoom
        radius: Heat point radius in pixels
        view_mode: "satellite" or "street" basemap
        translator: Used for marker popup text

    Returns:
        Map with heat and marker layers (no data layers when fires is empty)
    """
    translator = translator or Translator()
    m = _base_map(center, zoom, view_mode, min_zoom=5, scroll_wheel_zoom=False)

    if not fires:
        return m

    HeatMap(
        heatmap_points(fires),
        name="Fire intensity",
        radius=radius,
        blur=20,
        max_zoom=8,
        gradient=HEAT_GRADIENT,
    ).add_to(m)

    markers = folium.FeatureGroup(name="Fires", show=True)
    hint = html.escape(translator.t("fires.prediction.clickHint"))
    for fire in fires:
        popup_html = (
            f'<div style="text-align:center; width: 220px;">'
            f"<b>{fire.latitude:.3f}, {fire.longitude:.3f}</b><br>"
            f"{fire.brightness:.1f} K · {html.escape(fire.acquired_date)}<br>"
            f"<i>{hint}</i></div>"
        )
        folium.Marker(
            location=[fire.latitude, fire.longitude],
            icon=flame_icon("orange"),
            popup=folium.Popup(popup_html, max_width=240),
        ).add_to(markers)
    markers.add_to(m)

    logger.debug(f"Heatmap built with {len(fires)} fires ({view_mode})")
    return m


def build_risk_map(
    analysis: RiskAnalysis,
    lat: float,
    lon: float,
    radius_km: float,
    zoom: int = 8,
) -> folium.Map:
    """Map the analysed point, its search radius and the nearby fires."""
    border, _ = risk_colors(analysis.risk_assessment.level)
    m = _base_map((lat, lon), zoom, VIEW_STREET)

    folium.Circle(
        location=[lat, lon],
        radius=radius_km * 1000,
        color=border,
        fill=True,
        fill_opacity=0.15,
        weight=2,
        popup=f"<b>{html.escape(analysis.risk_assessment.level)}</b><br>{radius_km} km",
    ).add_to(m)

    folium.CircleMarker(location=[lat, lon], radius=5, color="#1f2937", fill=True).add_to(m)

    for fire in analysis.fires:
        distance = f"{fire.distance_km:.2f} km" if fire.distance_km is not None else ""
        folium.Marker(
            location=[fire.latitude, fire.longitude],
            icon=flame_icon("red"),
            popup=folium.Popup(f"{fire.brightness:.1f} K<br>{distance}", max_width=160),
        ).add_to(m)

    return m


def fit_to_forests(m: folium.Map, forests: List[Forest]) -> folium.Map:
    """Zoom the map to the extent of the given forests."""
    if len(forests) < 2:
        return m
    west, south, east, north = MultiPoint(
        [(f.longitude, f.latitude) for f in forests]
    ).bounds
    m.fit_bounds([[south, west], [north, east]])
    return m


def nearest_fire(
    fires: List[Fire],
    lat: float,
    lng: float,
    tolerance_deg: float = 0.01,
) -> Optional[Fire]:
    """
    Resolve a clicked coordinate to the closest fire.

    Returns None when no fire lies within the tolerance (degrees).
    """
    if not fires:
        return None
    clicked = Point(lng, lat)
    distances = [clicked.distance(Point(f.longitude, f.latitude)) for f in fires]
    index = int(np.argmin(distances))
    if distances[index] > tolerance_deg:
        return None
    return fires[index]


def fires_in_bounds(fires: List[Fire], bounds: Optional[Dict]) -> List[Fire]:
    """
    Fires inside a Leaflet bounds dict (``_southWest`` / ``_northEast``).

    Without bounds every fire is returned.
    """
    if not bounds or not bounds.get("_southWest") or not bounds.get("_northEast"):
        return list(fires)
    sw, ne = bounds["_southWest"], bounds["_northEast"]
    view = box(sw["lng"], sw["lat"], ne["lng"], ne["lat"])
    return [f for f in fires if view.covers(Point(f.longitude, f.latitude))]


def prediction_day_labels(predictions: List[DayPrediction], translator: Optional[Translator] = None) -> List[str]:
    translator = translator or Translator()
    return [translator.t("fires.prediction.day", day=p.day) for p in predictions]


def prediction_details(prediction: DayPrediction) -> Dict[str, Any]:
    """Numeric fields of one prediction day, exactly as served."""
    env = prediction.environmental_impact
    pop = prediction.population_impact
    return {
        "date": prediction.date,
        "spread_radius_km": prediction.spread_radius_km,
        "affected_area_ha": prediction.affected_area_ha,
        "co2_tonnes": env.co2_tonnes,
        "cars_equivalent": env.cars_equivalent,
        "species_at_risk": env.species_at_risk,
        "water_sources_at_risk": env.water_sources_at_risk,
        "people_at_risk": pop.people_at_risk,
        "families_affected": pop.families_affected,
        "severity": pop.severity,
    }


MISSING_VALUE = "—"


def _display(value: Any, locale: str, unit: str = "") -> str:
    if value is None or value == "":
        return MISSING_VALUE
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        text = format_exact_number(value, locale)
    else:
        text = html.escape(str(value))
    return f"{text} {unit}" if unit else text


def prediction_details_html(prediction: DayPrediction, translator: Optional[Translator] = None) -> str:
    """Render one prediction day as the popup detail block."""
    translator = translator or Translator()
    locale = translator.locale
    d = prediction_details(prediction)
    t = translator.t

    rows: List[Optional[Tuple[str, str]]] = [
        (t("fires.prediction.date"), html.escape(str(d["date"]))),
        (t("fires.prediction.spreadRadius"), _display(d["spread_radius_km"], locale, "km")),
        (t("fires.prediction.affectedArea"), _display(d["affected_area_ha"], locale, "ha")),
        None,
        ("🌳 " + t("fires.prediction.co2"), _display(d["co2_tonnes"], locale, "t")),
        ("🚗 " + t("fires.prediction.cars"), _display(d["cars_equivalent"], locale)),
        ("🐾 " + t("fires.prediction.species"), _display(d["species_at_risk"], locale)),
        ("💧 " + t("fires.prediction.water"), _display(d["water_sources_at_risk"], locale)),
        None,
        ("👥 " + t("fires.prediction.people"), _display(d["people_at_risk"], locale)),
        ("👨‍👩‍👧 " + t("fires.prediction.families"), _display(d["families_affected"], locale)),
        ("📊 " + t("fires.prediction.severity"), f"<b>{_display(d['severity'], locale)}</b>"),
    ]

    parts = []
    for row in rows:
        if row is None:
            parts.append('<hr style="margin: 4px 0;">')
        else:
            parts.append(f"<p><b>{html.escape(row[0])}:</b> {row[1]}</p>")
    return '<div style="font-size:13px; line-height:1.4;">' + "".join(parts) + "</div>"
