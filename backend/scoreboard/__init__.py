from flask import Flask
from flask_cors import CORS
import click
from config import Config
from scoreboard.store import create_store

cors_methods = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
cors_headers = ['Content-Type', 'Authorization']

def create_app(config_class=Config, store=None):
    """Build the service.

    ``store`` is the key-value store shared by every request; when omitted
    one is built from ``STORE_BACKEND`` once, here.
    """
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    # Comma-separated list, or '*'
    origins = [o.strip() for o in flask_app.config.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    CORS(
        flask_app,
        origins=origins or '*',
        methods=cors_methods,
        allow_headers=cors_headers,
        supports_credentials=True,
    )

    if store is None:
        store = create_store(flask_app.config)
    flask_app.extensions['store'] = store
    flask_app.logger.info(f"Using {type(store).__name__} for scores and cards")

    # Import and register blueprints here
    from scoreboard.main import main
    flask_app.register_blueprint(main)

    from scoreboard.api.players import players
    from scoreboard.api.cards import cards
    flask_app.register_blueprint(players, url_prefix='/api')
    flask_app.register_blueprint(cards, url_prefix='/api')

    @click.command('leaderboard')
    def leaderboard_command():
        """Prints every player's score."""
        from scoreboard.services.scores import leaderboard
        for entry in leaderboard(flask_app.extensions['store']):
            click.echo(f"{entry.username}\t{entry.score}")

    @click.command('clear-cards')
    @click.argument('username')
    def clear_cards_command(username):
        """Clears one player's saved card stack."""
        from scoreboard.services.cards import delete_cards
        existed = delete_cards(flask_app.extensions['store'], username)
        if existed:
            click.echo(f"Cleared saved cards for {username}.")
        else:
            click.echo(f"No saved cards for {username}.")

    flask_app.cli.add_command(leaderboard_command)
    flask_app.cli.add_command(clear_cards_command)

    return flask_app
