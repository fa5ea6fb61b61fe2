from flask import current_app, request
from flask_socketio import emit

from scoreboard import socketio
from scoreboard.keeper import get_keeper


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    get_keeper().connect(_get_sid())


def handle_disconnect(reason=None):
    get_keeper().disconnect(_get_sid())


def handle_submit_score(data):
    get_keeper().submit_score(_get_sid(), data)


def handle_advance_turn(data=None):
    get_keeper().advance_turn(_get_sid())


def handle_chat_message(data):
    get_keeper().chat(_get_sid(), data)


def handle_reset_game(data=None):
    get_keeper().reset()


def handle_ping(data=None):
    emit('pong', data or {})


def handle_error(exc):
    """Last-resort handler: log the failure and tell only the sender."""
    event = getattr(request, 'event', None) or {}
    current_app.logger.exception(f"[socket-error] event={event.get('message')} sid={_get_sid()}: {exc}")
    emit('error', {
        'kind': 'internal',
        'reason': 'Internal error while processing event',
        'data': {'event': event.get('message')},
    })


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('submit_score', handle_submit_score, namespace=namespace)
    socketio.on_event('advance_turn', handle_advance_turn, namespace=namespace)
    socketio.on_event('chat_message', handle_chat_message, namespace=namespace)
    socketio.on_event('reset_game', handle_reset_game, namespace=namespace)
    socketio.on_event('ping', handle_ping, namespace=namespace)
    socketio.on_error(namespace)(handle_error)
