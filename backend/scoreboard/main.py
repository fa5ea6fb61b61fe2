from flask import Blueprint, jsonify

from scoreboard.keeper import get_keeper

main = Blueprint('main', __name__)


@main.route('/')
def index():
    keeper = get_keeper()
    return jsonify({
        'message': 'Sapo scoreboard server is running',
        'observers': keeper.channel.observer_count(),
        'started_at': keeper.started_at,
        'namespace': keeper.channel.namespace,
        'endpoints': {
            'state': '/api/state',
            'reset': '/api/reset',
            'status': '/api/status',
            'sessions': '/api/sessions',
        },
    })


@main.route('/health')
def health():
    return jsonify({'status': 'ok'})
