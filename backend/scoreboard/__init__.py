from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def _socketio_origins(origins):
    return '*' if '*' in origins else origins


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = flask_app.config.get('CORS_ORIGINS', ['*'])
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=_socketio_origins(origins))

    # The live game is owned by a single keeper per application
    from scoreboard.broadcast import BroadcastChannel
    from scoreboard.keeper import EXTENSION_KEY, ScoreKeeper
    flask_app.extensions[EXTENSION_KEY] = ScoreKeeper(
        BroadcastChannel(socketio, namespace),
        player_names=flask_app.config.get('DEFAULT_PLAYERS') or ['Player 1', 'Player 2'],
        history_limit=int(flask_app.config.get('HISTORY_LIMIT', 10)),
        archive=bool(flask_app.config.get('ARCHIVE_SESSIONS', True)),
    )

    from scoreboard.main import main
    flask_app.register_blueprint(main)

    from scoreboard.api.game import game_api
    flask_app.register_blueprint(game_api, url_prefix='/api')

    from scoreboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    # Ensure models are imported so db.create_all() sees them
    from scoreboard import models  # noqa: F401

    @click.command('db-init')
    def db_init_command():
        """Creates the session archive tables."""
        with flask_app.app_context():
            db.create_all()
            print('Session archive tables created!')

    flask_app.cli.add_command(db_init_command)

    flask_app.logger.info(f"[startup] namespace={namespace} players={len(flask_app.config.get('DEFAULT_PLAYERS') or [])}")
    return flask_app
