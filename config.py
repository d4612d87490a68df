"""
Configuración global de TempMatrix
"""
import os

# ============================================================
# FUENTE DE DATOS
# ============================================================
DATA_SOURCE = os.getenv("TEMPMATRIX_DATA", "data/temperature_daily.csv")
DATA_TIMEOUT_SECONDS = 15  # Solo aplica a fuentes http(s)
CITY_NAME = os.getenv("TEMPMATRIX_CITY", "Hong Kong")

# Columnas del CSV diario
COL_DATE = "date"
COL_MAX = "max_temperature"
COL_MIN = "min_temperature"
DATE_FORMAT = "%Y-%m-%d"

# ============================================================
# CALENDARIO
# ============================================================
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTHS_PER_YEAR = 12
DEFAULT_YEAR_SPAN = 10  # Rango por defecto: últimos 10 años

# ============================================================
# LAYOUT DE LA MATRIZ (px)
# ============================================================
MARGIN_TOP = 30
MARGIN_RIGHT = 90
MARGIN_BOTTOM = 30
MARGIN_LEFT = 90
EXTRA_RIGHT = 120  # Hueco para la leyenda

CELL_W = 70
CELL_H = 48
CELL_RADIUS = 6
BAND_PADDING_INNER = 0.15
SPARK_PAD = 6

LEGEND_W = 12
LEGEND_H = 220
LEGEND_STOPS = 11  # 0.0, 0.1, ..., 1.0
LEGEND_TICKS = 6

# Salto de etiquetas de año
TICK_SKIP_WIDE = 20  # > 20 años: 1 de cada 4
TICK_SKIP_MEDIUM = 12  # > 12 años: 1 de cada 2

# ============================================================
# COLORES
# ============================================================
COLORSCALE_NAME = "RdYlBu"  # Divergente, invertida: frío = azul
MISSING_FILL = "#f3f3f3"
CELL_STROKE = "rgba(0,0,0,0.12)"
LEGEND_STROKE = "rgba(0,0,0,0.15)"
SPARK_MAX_COLOR = "rgba(120, 20, 20, 0.85)"
SPARK_MIN_COLOR = "rgba(20, 40, 120, 0.85)"
SPARK_WIDTH = 1.2

# ============================================================
# EXPORTACIÓN
# ============================================================
EXPORT_PAD_W = 200
EXPORT_PAD_H = 100
EXPORT_BACKGROUND = "#ffffff"
EXPORT_TEXT_COLOR = "rgba(15, 18, 25, 0.92)"  # Texto oscuro sobre el fondo blanco, también con tema oscuro
EXPORT_FILENAME = "hong_kong_temperature_matrix.png"

# ============================================================
# LOGGING
# ============================================================
LOG_LEVEL = os.getenv("TEMPMATRIX_LOG_LEVEL", "INFO")
