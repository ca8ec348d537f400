# app.py

import logging
import os
from typing import Any, Dict, Optional

from flask import Blueprint, Flask, abort, current_app, jsonify, render_template, request, send_file
from jinja2 import TemplateError

from pingsweep.addresses import enumerate_hosts, subnet_size
from pingsweep.config import configure_logging, load_settings
from pingsweep.errors import InvalidSubnet, MalformedRequest, SweepError
from pingsweep.ping import is_alive
from pingsweep.scanner import PingScanner

logger = logging.getLogger(__name__)

bp = Blueprint('sweep', __name__)


# --- Request Helpers ---

def read_subnet(payload: Any) -> str:
    """Pulls the subnet string out of a decoded /scan request body."""
    if payload is None:
        raise MalformedRequest("request body is not valid JSON")
    if not isinstance(payload, dict):
        raise MalformedRequest("request body must be a JSON object")

    subnet = payload.get('subnet')
    if not isinstance(subnet, str) or not subnet:
        raise MalformedRequest("request body must contain a 'subnet' string")
    return subnet


def check_subnet_size(subnet: str, limit: int) -> None:
    size = subnet_size(subnet)
    if size > limit:
        raise InvalidSubnet(f"{subnet} spans {size} addresses, the limit is {limit}")


# --- Flask Routes ---

@bp.route('/')
def index():
    """Single page UI, prefilled with the default subnet."""
    try:
        return render_template(
            'index.html',
            default_subnet=current_app.config['DEFAULT_SUBNET'],
            has_icon=bool(current_app.config['ICON']),
        )
    except TemplateError as e:
        logger.error("Failed to render index.html: %s", e)
        return str(e), 500


@bp.route('/scan', methods=['POST'])
def scan():
    """
    Sweeps the posted subnet and returns [{"ip": ..., "alive": ...}, ...]
    sorted by address. The request blocks until every probe has finished.
    """
    try:
        subnet = read_subnet(request.get_json(force=True, silent=True))
        check_subnet_size(subnet, current_app.config['MAX_SUBNET_ADDRESSES'])
        addresses = enumerate_hosts(subnet)
    except SweepError as e:
        logger.info("Rejected scan request from %s: %s", request.remote_addr, e)
        return jsonify({'error': str(e)}), 400

    logger.info("Scanning %s for %s (%d addresses)", subnet, request.remote_addr, len(addresses))
    scanner = PingScanner(
        max_workers=current_app.config['SCAN_WORKERS'],
        prober=current_app.config['PROBER'],
    )
    results = scanner.scan(addresses)
    logger.info("Scan of %s complete: %d/%d alive",
                subnet, sum(1 for r in results if r['alive']), len(results))
    return jsonify(results)


@bp.route('/favicon.ico')
def favicon():
    icon_path = current_app.config['ICON']
    if not icon_path or not os.path.isfile(icon_path):
        abort(404)
    return send_file(os.path.abspath(icon_path))


# --- App Factory ---

def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Builds the Flask app from environment settings. `overrides` is applied
    on top of app.config last, which is how the tests swap in a stub PROBER.
    """
    settings = load_settings()

    app = Flask(__name__)
    app.config.update(
        PORT=settings.port,
        DEFAULT_SUBNET=settings.default_subnet,
        ICON=settings.icon_path,
        SCAN_WORKERS=settings.max_workers,
        MAX_SUBNET_ADDRESSES=settings.max_subnet_addresses,
        PROBER=is_alive,
    )
    if overrides:
        app.config.update(overrides)

    app.register_blueprint(bp)
    return app


app = create_app()


# --- Run App ---
if __name__ == '__main__':
    configure_logging()

    logger.info("Starting server on port %s with default subnet: %s",
                app.config['PORT'], app.config['DEFAULT_SUBNET'])
    if app.config['ICON']:
        logger.info("Using custom icon: %s", app.config['ICON'])

    # threaded so one long sweep does not block the page or other scans
    app.run(host='0.0.0.0', port=app.config['PORT'], threaded=True)
