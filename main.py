from flask import Flask, request, jsonify, render_template, make_response
from flask_cors import CORS
from roi_engine import CalculatorInputs, CalculatorSession, RoiProcessor
from roi_engine.export import EXPORT_FILENAME
from roi_engine.output import OutputBuilder
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes (the calculator front end is served from another origin)
CORS(app)

# Initialize the processor
processor = RoiProcessor()


@app.route("/", methods=["GET"])
def index():
    """Serve the results view for the default scenario"""
    inputs = CalculatorInputs()
    view = OutputBuilder().build(processor.compute(inputs), inputs)
    response = make_response(render_template("summary.html", view=view))
    response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
    response.headers['Pragma'] = 'no-cache'
    response.headers['Expires'] = '0'
    return response


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "ESI Channel Partner ROI Calculator API",
        "version": "1.0",
        "endpoints": {
            "calculator": "/ [GET]",
            "calculate": "/calculate [POST]",
            "export": "/export [POST]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/calculate", methods=["POST"])
def calculate():
    """
    Recompute every derived value for the posted inputs
    """
    try:
        input_data = request.get_json(force=True, silent=True)

        if input_data is None:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        result = processor.process_from_dict(input_data)

        logger.info(f"Calculated scenario with {len(result['inputs']['tiers'])} tier(s)")

        return jsonify(result), 200

    except ValueError as e:
        # Validation errors from engine
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


@app.route("/export", methods=["POST"])
def export():
    """
    Render the posted scenario to a downloadable PDF summary
    """
    try:
        input_data = request.get_json(force=True, silent=True)

        if input_data is None:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        session = CalculatorSession(CalculatorInputs.from_dict(input_data), processor=processor)

    except ValueError as e:
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500

    logger.info(f"Exporting scenario with {len(session.tiers)} tier(s)")
    pdf_bytes = session.export_pdf()
    if pdf_bytes is None:
        return jsonify({
            "error": "PDF export failed",
            "status": "failed"
        }), 500

    response = make_response(pdf_bytes)
    response.headers['Content-Type'] = 'application/pdf'
    response.headers['Content-Disposition'] = f'attachment; filename="{EXPORT_FILENAME}"'
    return response


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
