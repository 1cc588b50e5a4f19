"""
Flask REST API for SciCalc
Exposes the calculator buttons as JSON endpoints
"""
import threading

from flask import Flask, jsonify, request
from flask_cors import CORS
from calculator import Calculator
import keypad
import config

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# One engine shared by every request; hold engine_lock while touching it
calculator = Calculator()
engine_lock = threading.Lock()


def _state():
    return {'success': True, 'data': calculator.snapshot()}


def _rejected(button):
    return jsonify({
        'success': False,
        'error': config.INVALID_INPUT,
        'button': button,
        'data': calculator.snapshot()
    }), 400


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
        <h1>{config.APP_NAME} API Server</h1>
        <p>Version {config.VERSION}</p>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/display" style="color: #2196F3;">/api/display</a> - Current display and memory</li>
            <li><a href="/api/buttons" style="color: #2196F3;">/api/buttons</a> - Accepted button tokens</li>
            <li>POST /api/press - Press one button: {{"button": "5"}}</li>
            <li>POST /api/sequence - Press several buttons: {{"buttons": ["5", "+", "3", "="]}}</li>
            <li>POST /api/clear - AC (memory is kept)</li>
            <li>POST /api/reset - Start over with a fresh calculator</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/display')
def get_display():
    """Get the current display, pending operation and memory"""
    try:
        with engine_lock:
            return jsonify(_state())
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/buttons')
def get_buttons():
    """Get the list of accepted button tokens"""
    return jsonify({
        'success': True,
        'data': keypad.BUTTONS,
        'count': len(keypad.BUTTONS)
    })


@app.route('/api/press', methods=['POST'])
def press_button():
    """Press a single button"""
    try:
        payload = request.get_json(silent=True) or {}
        button = payload.get('button')
        with engine_lock:
            if not isinstance(button, str):
                return _rejected(button)
            if not keypad.press(calculator, button):
                return _rejected(button)
            return jsonify(_state())
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/sequence', methods=['POST'])
def press_sequence():
    """Press buttons in order, stopping at the first rejected one"""
    try:
        payload = request.get_json(silent=True) or {}
        buttons = payload.get('buttons')
        if not isinstance(buttons, list):
            return jsonify({'success': False, 'error': "'buttons' must be a list"}), 400

        with engine_lock:
            for button in buttons:
                if not isinstance(button, str) or not keypad.press(calculator, button):
                    return _rejected(button)
            return jsonify(_state())
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/clear', methods=['POST'])
def clear():
    """AC: clear the display, keep memory and the pending operation"""
    with engine_lock:
        calculator.all_clear()
        return jsonify(_state())


@app.route('/api/reset', methods=['POST'])
def reset():
    """Replace the calculator with a fresh one (memory included)"""
    global calculator
    with engine_lock:
        calculator = Calculator()
        return jsonify(_state())


def print_banner():
    print("\n" + "="*60)
    print(f"{config.APP_NAME} API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}/api")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}/api")
    print("="*60 + "\n")


def run():
    print_banner()
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)


if __name__ == '__main__':
    run()
