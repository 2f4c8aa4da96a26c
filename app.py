import logging
import os
import uuid

from flask import Flask, render_template, request, jsonify
from flask_cors import CORS

from config import Config
from csv_parser import parse_csv
from errors import AppError, ValidationError
from summarizer import Summarizer, build_prompt

logger = logging.getLogger(__name__)

MISSING_TEXT_MESSAGE = "Missing 'text' in request body"


def _staging_path(upload_folder):
    """Return a path for an uploaded file that is unique to this request."""
    return os.path.join(upload_folder, f"{uuid.uuid4().hex}.csv")


def _remove_staged(path):
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.debug("No staged upload to remove at %s", path)
    except OSError:
        logger.exception("Could not remove staged upload %s", path)


def create_app(config=None, summarizer=None):
    config = config or Config.from_env()
    summarizer = summarizer or Summarizer(config)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_mb * 1024 * 1024
    app.config["UPLOAD_FOLDER"] = config.upload_folder
    # Records keep the column order of the CSV header
    app.json.sort_keys = False
    os.makedirs(config.upload_folder, exist_ok=True)

    CORS(app, origins=config.cors_origin_list)

    @app.route('/')
    def index():
        return "Business Report AI Backend is running.", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route('/app')
    def frontend():
        return render_template('index.html')

    @app.route('/upload', methods=['POST'])
    def upload():
        file = request.files.get('file')
        if file is None or not file.filename:
            error = ValidationError("No file uploaded")
            return jsonify(error.to_dict()), error.status_code

        path = _staging_path(app.config["UPLOAD_FOLDER"])
        try:
            file.save(path)
            data = parse_csv(path)
            logger.info("Parsed %d records from %s", len(data), file.filename)
            summary = summarizer.summarize(build_prompt(data))
            return jsonify({'data': data, 'summary': summary})
        except AppError as e:
            logger.warning("Upload of %s failed: %s", file.filename, e.message)
            return jsonify(e.to_dict()), e.status_code
        except Exception:
            logger.exception("Unexpected error while processing upload %s", file.filename)
            return jsonify({'error': 'Upload processing failed', 'kind': 'error'}), 500
        finally:
            _remove_staged(path)

    @app.route('/summarize-text', methods=['POST'])
    def summarize_text():
        data = request.get_json(silent=True)
        text = data.get('text') if isinstance(data, dict) else None

        if not text:
            return jsonify({'error': MISSING_TEXT_MESSAGE}), 400
        if not isinstance(text, str):
            return jsonify({'error': "'text' must be a string"}), 400

        try:
            summary = summarizer.summarize(text)
            return jsonify({'summary': summary})
        except AppError as e:
            return jsonify(e.to_dict()), e.status_code
        except Exception:
            logger.exception("Unexpected error while summarizing text")
            return jsonify({'error': 'Summarization failed', 'kind': 'error'}), 500

    @app.errorhandler(413)
    def too_large(e):
        return jsonify({'error': f"File exceeds the {config.max_upload_mb} MB upload limit",
                        'kind': 'validation_error'}), 413

    return app


def configure_logging(level="INFO"):
    logging.basicConfig(level=level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


if __name__ == "__main__":
    settings = Config.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server running on http://localhost:%s", settings.port)
    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug)
