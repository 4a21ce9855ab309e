import logging
import sys

from flask import Flask, Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_config
from constants import VALID_SYSTEMS, MIN_MULTIPLIER, MAX_LENGTHS
from models import Ingredient, MeasurementSystem
from services import (
    IngredientEngine,
    detect_measurement_system,
    format_dual_amount,
    ingredient_to_text,
)
from services.parsing import split_lines
from utils.sanitizer import sanitize_text, sanitize_ingredient_text

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__)

# Stateless; safe to share across requests and threads
engine = IngredientEngine()


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
        if result != result:  # NaN
            return default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def _resolve_system(data):
    """Target system from the request, or the configured default."""
    system = (data.get('system') or '').strip().lower()
    if not system and current_app.config['APPLY_CONVERSION_BY_DEFAULT']:
        system = current_app.config['DEFAULT_MEASUREMENT_SYSTEM']
    if not system:
        return None
    if system not in VALID_SYSTEMS:
        raise ValueError(f"system must be one of {sorted(VALID_SYSTEMS)}")
    return MeasurementSystem(system)


def _resolve_multiplier(data):
    return safe_float(
        data.get('multiplier'),
        default=1.0,
        min_val=MIN_MULTIPLIER,
        max_val=current_app.config['MAX_MULTIPLIER'],
    )


def _request_lines(data):
    """Ingredient lines from either a 'lines' list or a 'text' block."""
    if data.get('lines') is not None:
        lines = data['lines']
        if not isinstance(lines, list):
            raise ValueError("'lines' must be a list of strings")
        lines = [sanitize_ingredient_text(line) for line in lines]
        lines = [line for line in lines if line]
    else:
        text = sanitize_text(data.get('text'), max_length=MAX_LENGTHS['request_text'])
        lines = split_lines(text)

    max_lines = current_app.config['MAX_INGREDIENT_LINES']
    if len(lines) > max_lines:
        raise ValueError(f"too many ingredient lines ({len(lines)} > {max_lines})")
    return lines


def _ingredient_json(ingredient):
    result = ingredient.to_dict()
    result['display'] = ingredient_to_text(ingredient)
    return result


# ============================================
# ROUTES - HEALTH
# ============================================

@api.route('/health')
def health():
    return jsonify({'status': 'ok'})


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@api.route('/api/parse', methods=['POST'])
def parse_ingredients():
    data = _json_body()
    ingredients = engine.parse_lines(_request_lines(data))
    return jsonify({
        'ingredients': [_ingredient_json(ing) for ing in ingredients],
        'system': detect_measurement_system(ingredients).value,
    })


@api.route('/api/convert', methods=['POST'])
def convert_amount():
    data = _json_body()
    system = _resolve_system(data)
    if system is None:
        raise ValueError("'system' is required")

    amount = sanitize_ingredient_text(data.get('amount'), max_length=MAX_LENGTHS['amount'])
    unit = engine.normalize_unit(sanitize_ingredient_text(data.get('unit'), max_length=MAX_LENGTHS['unit']))
    ingredient = Ingredient(
        quantity=engine.parse_amount(amount),
        amount=amount,
        unit=unit if unit.name else None,
    )
    converted = engine.convert_ingredient(ingredient, system)
    return jsonify({
        'amount': converted.amount,
        'unit': converted.unit.display if converted.unit else None,
        'canonical_unit': converted.unit.name if converted.unit else None,
        'converted': converted is not ingredient,
        'dual': format_dual_amount(ingredient),
    })


@api.route('/api/scale', methods=['POST'])
def scale_amount():
    data = _json_body()
    multiplier = _resolve_multiplier(data)

    if data.get('text'):
        ingredient = engine.parse_line(sanitize_ingredient_text(data['text']))
        scaled = engine.scale(ingredient, multiplier)
        return jsonify({'ingredient': _ingredient_json(scaled), 'multiplier': multiplier})

    amount = sanitize_ingredient_text(data.get('amount'), max_length=MAX_LENGTHS['amount'])
    return jsonify({'amount': engine.scale_amount(amount, multiplier), 'multiplier': multiplier})


@api.route('/api/format', methods=['POST'])
def format_shopping_list():
    data = _json_body()
    system = _resolve_system(data)
    multiplier = _resolve_multiplier(data)

    result = engine.build_shopping_list(_request_lines(data), system, multiplier)
    return jsonify({
        'ingredients': [_ingredient_json(ing) for ing in result['ingredients']],
        'text': result['text'],
        'search_terms': result['search_terms'],
        'source_system': result['source_system'].value,
        'system': system.value if system else None,
        'multiplier': multiplier,
    })


# ============================================
# ERROR HANDLERS
# ============================================

@api.app_errorhandler(ValueError)
def handle_bad_input(error):
    logger.warning("Rejected request to %s: %s", request.path, error)
    return jsonify({'error': str(error)}), 400


@api.app_errorhandler(HTTPException)
def handle_http_error(error):
    return jsonify({'error': error.description}), error.code


# ============================================
# APPLICATION FACTORY
# ============================================

def configure_logging(level):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    configure_logging(app.config['LOG_LEVEL'])
    app.register_blueprint(api)
    return app


app = create_app()


if __name__ == '__main__':
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
