from flask import Blueprint, current_app, jsonify

from scoreboard.api.helpers import BadRequest, body_field, plain_error, query_username
from scoreboard.services.cards import delete_cards, push_card, saved_cards
from scoreboard.store import StoreError, get_store

cards = Blueprint('cards', __name__)


@cards.route('/saveCardDraw', methods=['POST'])
def save_card_draw():
    try:
        username = query_username()
        card_type = body_field('cardType')
    except BadRequest as exc:
        return plain_error(str(exc), 400)

    store = get_store()
    try:
        push_card(store, username, card_type)
    except StoreError as exc:
        current_app.logger.error(f"[cards] user={username} save failed: {exc}")
        return plain_error('Error saving card draw', 500)

    _log_saved_cards(store, username)
    return jsonify({'message': 'Card draw saved successfully'})


def _log_saved_cards(store, username: str) -> None:
    try:
        current = saved_cards(store, username)
    except StoreError as exc:
        current_app.logger.warning(f"[cards] user={username} could not read back cards: {exc}")
        return
    current_app.logger.info(f"[cards] user={username} current cards: {current}")


@cards.route('/deleteSavedCards', methods=['DELETE'])
def delete_saved_cards():
    try:
        username = query_username()
    except BadRequest as exc:
        return plain_error(str(exc), 400)

    try:
        existed = delete_cards(get_store(), username)
    except StoreError as exc:
        current_app.logger.error(f"[cards] user={username} delete failed: {exc}")
        return plain_error('Error deleting saved cards', 500)
    current_app.logger.debug(f"[cards] user={username} cleared (existed={existed})")
    return jsonify({'status': 'success'})


@cards.route('/fetchSavedCards', methods=['GET'])
def fetch_saved_cards():
    try:
        username = query_username()
    except BadRequest as exc:
        return plain_error(str(exc), 400)

    try:
        current = saved_cards(get_store(), username)
    except StoreError as exc:
        current_app.logger.error(f"[cards] user={username} fetch failed: {exc}")
        return plain_error('Error fetching saved cards', 500)
    return jsonify(current)
