#!/usr/bin/env python3
"""
Script para exportar la matriz de temperaturas a PNG sin abrir la app
"""
import argparse
import logging
import sys
from pathlib import Path

from config import DATA_SOURCE, EXPORT_FILENAME, LOG_LEVEL
from api import DataSourceError, load_daily_observations
from services import MatrixSession, compose_scene, export_png
from components.matrix_chart import build_matrix_figure
from components.theme import apply_plotly_theme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exporta la matriz mensual de temperaturas a PNG")
    parser.add_argument("--data", default=DATA_SOURCE)
    parser.add_argument("--start", type=int, default=None, help="Primer año (por defecto: últimos 10 años)")
    parser.add_argument("--end", type=int, default=None, help="Último año")
    parser.add_argument("--mode", choices=["max", "min"], default="max")
    parser.add_argument("--dark", action="store_true", default=False)
    parser.add_argument("--output", default=EXPORT_FILENAME)
    return parser


def render(args) -> Path:
    observations = load_daily_observations(args.data)
    session = MatrixSession.from_observations(observations)
    if args.start is not None or args.end is not None:
        start = args.start if args.start is not None else session.start_year
        end = args.end if args.end is not None else session.end_year
        session.set_year_range(start, end)
    if args.mode != session.mode:
        session.toggle_mode()

    template_name = apply_plotly_theme(args.dark)
    scene = compose_scene(session.cells(), session.year_range, session.mode, session.scale)
    png = export_png(build_matrix_figure(scene), style_layers=[template_name])

    output = Path(args.output)
    output.write_bytes(png)
    return output


def main(argv=None) -> int:
    logging.basicConfig(level=LOG_LEVEL)
    args = build_parser().parse_args(argv)

    print("=== TEMPMATRIX PNG ===")
    print(f"Datos: {args.data}")
    try:
        output = render(args)
    except DataSourceError as e:
        print(f"❌ ERROR cargando datos: {e.kind}" + (f" (HTTP {e.status_code})" if e.status_code else ""))
        return 1
    except (ValueError, RuntimeError) as e:
        print(f"❌ ERROR: {e}")
        return 1

    print(f"✅ PNG guardado: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
