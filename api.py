"""
Flask REST API for the SimpleCalc Web Portal
Drives one calculator engine per session over JSON
"""
import threading

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
import locales
from calculator import CalculatorEngine
from keymap import key_to_event

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# session id -> engine; the lock keeps each engine to one event at a time
engines = {}
engines_lock = threading.Lock()


def get_engine(session, language=config.DEFAULT_LANGUAGE):
    """Fetch (or create) the engine for a session, refreshing its translator"""
    engine = engines.get(session)
    if engine is None:
        engine = CalculatorEngine()
        engines[session] = engine
    engine.tr = locales.get_translator(language)
    return engine


def _session_args(data):
    return (data.get('session') or config.DEFAULT_SESSION,
            data.get('language') or config.DEFAULT_LANGUAGE)


@app.route('/')
@app.route('/api')
def api_info():
    """API information page"""
    return """
    <html>
    <head><title>SimpleCalc API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
        <h1>SimpleCalc API Server</h1>
        <h2>Available Endpoints:</h2>
        <ul>
            <li>POST /api/calculate - {"action", "value", "session"}</li>
            <li>POST /api/key - {"char", "keysym", "session"}</li>
            <li><a href="/api/state" style="color: #2196F3;">/api/state</a> - Current display state</li>
            <li>POST /api/reset - Start a fresh calculator</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/calculate', methods=['POST'])
def calculate():
    """Apply one input event: digit|dot|toggle_sign|clear|clear_entry|backspace|operator|special|equals"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'success': False, 'error': 'No data provided'}), 400

    try:
        session, language = _session_args(data)
        with engines_lock:
            engine = get_engine(session, language)
            state = engine.handle(data.get('action', ''), data.get('value'))
        return jsonify({'success': True, 'data': state})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/key', methods=['POST'])
def press_key():
    """Apply a keyboard equivalent; unbound keys leave the state unchanged"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'success': False, 'error': 'No data provided'}), 400

    try:
        session, language = _session_args(data)
        event = key_to_event(data.get('char', ''), data.get('keysym', ''))
        with engines_lock:
            engine = get_engine(session, language)
            if event is None:
                state = engine.snapshot()
            else:
                state = engine.handle(*event)
        return jsonify({'success': True, 'data': state, 'handled': event is not None})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/state')
def get_state():
    """Get the current display state of a session"""
    try:
        session, language = _session_args(request.args)
        with engines_lock:
            state = get_engine(session, language).snapshot()
        return jsonify({'success': True, 'data': state})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/reset', methods=['POST'])
def reset():
    """Replace a session's engine with a fresh one"""
    try:
        data = request.get_json(silent=True) or {}
        session, language = _session_args(data)
        with engines_lock:
            engines.pop(session, None)
            state = get_engine(session, language).snapshot()
        return jsonify({'success': True, 'data': state})
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


def main():
    print("\n" + "="*60)
    print("SimpleCalc Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)


if __name__ == '__main__':
    main()
