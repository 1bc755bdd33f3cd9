"""Flask server for Minesweeper game."""
import json
import logging
import sys
import uuid
from datetime import datetime

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from minesweeper.errors import NotFoundError, StateError, ValidationError
from minesweeper.registry import GameRegistry
from minesweeper.settings import Settings, load_settings
from minesweeper.types import GameConfig, GameView, TurnRequest

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')


def get_registry() -> GameRegistry:
    return current_app.extensions['minesweeper_registry']


def serialize_game_view(view: GameView) -> dict:
    """Convert a game view to JSON and log it."""
    data = view.to_dict()
    logger.info(json.dumps(data, indent=2))
    return data


def read_int_fields(data, *names):
    """Pull integer fields out of a request body, or None if any is missing."""
    if not isinstance(data, dict):
        return None
    values = []
    for name in names:
        value = data.get(name)
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        values.append(value)
    return values


@api.route('/new', methods=['POST'])
def create_game():
    """Create a new game."""
    try:
        fields = read_int_fields(request.get_json(silent=True), 'width', 'height', 'mines_count')
        if fields is None:
            return jsonify({'error': 'Invalid game configuration'}), 400

        width, height, mine_count = fields
        config = GameConfig(width=width, height=height, mine_count=mine_count)
        view = get_registry().create_game(config)
        return jsonify(serialize_game_view(view))

    except ValidationError as error:
        return jsonify({'error': error.message}), 400

    except Exception as error:
        logger.exception(f"Error creating game: {error}")
        return jsonify({'error': 'Failed to create game'}), 500


@api.route('/turn', methods=['POST'])
def make_turn():
    """Make a turn."""
    try:
        data = request.get_json(silent=True)
        fields = read_int_fields(data, 'row', 'col')
        if fields is None:
            return jsonify({'error': 'Invalid turn request'}), 400

        try:
            game_id = uuid.UUID(str(data.get('game_id')))
        except ValueError:
            return jsonify({'error': 'Invalid game_id'}), 400

        row, col = fields
        view = get_registry().make_turn(TurnRequest(game_id=game_id, row=row, col=col))
        return jsonify(serialize_game_view(view))

    except (ValidationError, NotFoundError, StateError) as error:
        return jsonify({'error': error.message}), 400

    except Exception as error:
        logger.exception(f"Error making turn: {error}")
        return jsonify({'error': 'Failed to make turn'}), 500


@api.route('/games/<game_id>', methods=['GET'])
def get_game_state(game_id):
    """Get game state."""
    try:
        view = get_registry().get_game(uuid.UUID(game_id))
        return jsonify(view.to_dict())

    except (ValueError, NotFoundError):
        return jsonify({'error': 'Game not found'}), 404


@api.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'OK',
        'timestamp': datetime.now().isoformat()
    })


def create_app(registry: GameRegistry | None = None, settings: Settings | None = None) -> Flask:
    """Build the Flask application around a game registry."""
    settings = settings or Settings()
    if registry is None:
        registry = GameRegistry(rng=settings.make_rng())

    app = Flask(__name__)
    CORS(app, send_wildcard=True)
    app.extensions['minesweeper_registry'] = registry
    app.register_blueprint(api)
    return app


def main():
    """Start the Flask server."""
    try:
        settings = load_settings()
        logging.basicConfig(level=settings.log_level)

        app = create_app(settings=settings)
        logger.info(f"Minesweeper server running on http://localhost:{settings.port}")
        app.run(host=settings.host, port=settings.port, debug=False)

    except Exception as error:
        logger.error(f"Failed to start server: {error}")
        sys.exit(1)


if __name__ == "__main__":
    main()
