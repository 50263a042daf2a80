from flask import Blueprint, current_app, jsonify

from scoreboard.api.helpers import BadRequest, body_field, plain_error, query_username
from scoreboard.services.cards import delete_cards
from scoreboard.services.scores import ensure_player, increment_score, leaderboard
from scoreboard.store import StoreError, get_store

players = Blueprint('players', __name__)


@players.route('/login', methods=['POST'])
def login():
    try:
        username = body_field('username')
    except BadRequest as exc:
        return plain_error(str(exc), 400)

    try:
        created = ensure_player(get_store(), username)
    except StoreError as exc:
        current_app.logger.error(f"[login] user={username} store error: {exc}")
        return plain_error(str(exc), 500)
    if created:
        current_app.logger.info(f"[login] new player {username}")
    return jsonify({'status': 'success'})


@players.route('/score', methods=['POST'])
def update_score():
    # Body username gets the point; query username gets its cards cleared.
    # The two are deliberately not compared.
    try:
        winner = body_field('username')
    except BadRequest as exc:
        return plain_error(str(exc), 400)

    store = get_store()
    try:
        score = increment_score(store, winner)
    except StoreError as exc:
        current_app.logger.error(f"[score] user={winner} increment failed: {exc}")
        return plain_error(str(exc), 500)
    current_app.logger.info(f"[score] user={winner} score={score}")

    try:
        username = query_username()
    except BadRequest as exc:
        return plain_error(str(exc), 400)

    try:
        delete_cards(store, username)
    except StoreError as exc:
        current_app.logger.error(f"[score] user={username} clearing cards failed: {exc}")
        return plain_error('Error deleting saved cards', 500)
    return jsonify({'status': 'success'})


@players.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    try:
        entries = leaderboard(get_store())
    except StoreError as exc:
        current_app.logger.error(f"[leaderboard] key scan failed: {exc}")
        return plain_error(str(exc), 500)
    return jsonify([entry.to_dict() for entry in entries])
