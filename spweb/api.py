import logging

from flask import Flask, jsonify, request

from passcraft.config import DEFAULTS
from passcraft.errors import ConfigError, PassCraftError
from passcraft.generator import generate_password
from passcraft.score import score_password

logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.errorhandler(PassCraftError)
def handle_passcraft_error(e):
    logger.info("rejected request: %s", e)
    return jsonify({"error": str(e)}), 400


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("request body must be a JSON object")
    return data


def _text_field(data, name, default):
    value = data.get(name, default)
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string, got {value!r}")
    return value


@app.route('/')
def home():
    return jsonify({
        "message": "PassCraft API is running"
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_body()
    length = data.get('length', DEFAULTS['length'])
    options = {
        'use_upper': data.get('upper', True),
        'use_lower': data.get('lower', True),
        'use_digits': data.get('digits', True),
        'use_symbols': data.get('symbols', True)
    }
    password = generate_password(length, **options)
    strength = score_password(password, _text_field(data, "policy", DEFAULTS["strength_policy"]))
    return jsonify({'password': password, 'strength': strength.as_dict()})


@app.route('/score', methods=['POST'])
def score_route():
    data = _json_body()
    password = _text_field(data, "password", "")
    result = score_password(password, _text_field(data, "policy", DEFAULTS["strength_policy"]))
    return jsonify(result.as_dict())


if __name__ == "__main__":
    app.run(debug=True)
