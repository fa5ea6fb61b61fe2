from flask import Blueprint, jsonify, request, current_app

from scoreboard import db
from scoreboard.keeper import get_keeper
from scoreboard.models import GameRecord
from scoreboard.services.game.archive import session_stats
from scoreboard.state import utc_now_iso


game_api = Blueprint('game_api', __name__)

DEFAULT_SESSIONS_LIMIT = 20
MAX_SESSIONS_LIMIT = 100


@game_api.route('/state', methods=['GET'])
def get_state():
    current_app.logger.debug('[state] snapshot requested')
    return jsonify({
        'success': True,
        'data': get_keeper().snapshot(),
        'timestamp': utc_now_iso(),
    })


@game_api.route('/reset', methods=['POST'])
def reset_game():
    snapshot = get_keeper().reset()
    return jsonify({
        'success': True,
        'message': 'Game reset',
        'data': snapshot,
    })


@game_api.route('/status', methods=['GET'])
def get_status():
    keeper = get_keeper()
    snapshot = keeper.snapshot()
    return jsonify({
        'observers': keeper.channel.observer_count(),
        'players': len(snapshot['players']),
        'history_length': len(snapshot['history']),
        'session_active': snapshot['sessionActive'],
        'server_started_at': keeper.started_at,
    })


@game_api.route('/sessions', methods=['GET'])
def list_sessions():
    limit = request.args.get('limit', DEFAULT_SESSIONS_LIMIT)
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        return jsonify({'error': 'limit must be an integer'}), 400
    if not 1 <= limit <= MAX_SESSIONS_LIMIT:
        return jsonify({'error': f'limit must be between 1 and {MAX_SESSIONS_LIMIT}'}), 400

    records = GameRecord.query.order_by(GameRecord.id.desc()).limit(limit).all()
    return jsonify([r.to_dict() for r in records])


@game_api.route('/sessions/stats', methods=['GET'])
def get_session_stats():
    return jsonify(session_stats())


@game_api.route('/sessions/<int:record_id>', methods=['GET'])
def get_session(record_id):
    record = db.session.get(GameRecord, record_id)
    if record is None:
        return jsonify({'error': 'Session not found'}), 404
    return jsonify(record.to_dict())
