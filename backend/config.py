import os


def _csv(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///scoreboard.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Origins allowed for both the HTTP API and the Socket.IO handshake
    CORS_ORIGINS = _csv(os.environ.get('CORS_ORIGINS', '*'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    # Number of plays kept in the live history (newest first)
    HISTORY_LIMIT = int(os.environ.get('HISTORY_LIMIT', '10'))
    # Seed players, ids assigned 1..N in this order
    DEFAULT_PLAYERS = _csv(os.environ.get('DEFAULT_PLAYERS', 'Player 1,Player 2'))
    # Store a summary row for every finished session on reset
    ARCHIVE_SESSIONS = os.environ.get('ARCHIVE_SESSIONS', 'true').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
