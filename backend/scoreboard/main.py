from flask import Blueprint, current_app, jsonify

from scoreboard.api.helpers import plain_error
from scoreboard.store import StoreError, get_store

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the card game scoreboard!'})

@main.route('/health')
def health():
    try:
        get_store().ping()
    except StoreError as exc:
        current_app.logger.warning(f"[health] store ping failed: {exc}")
        return plain_error('Store unavailable', 503)
    return jsonify({'status': 'ok'})
