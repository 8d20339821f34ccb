import logging

from flask import Blueprint, current_app, jsonify, request
from services.errors import RemoteTranslationError
from services.language_utils import get_language_name, is_supported_code
from services.llm_translation_service import LLMTranslationService

logger = logging.getLogger(__name__)

bp = Blueprint('translation', __name__, url_prefix='/translation')


@bp.route('/translate', methods=['POST'])
def translate():
    """
    Translate text using the phrase table, the vocabulary, or the AI fallback.

    Request body:
    {
        "text": "casa",
        "from_lang": "pt",
        "to_lang": "kriol"
    }

    Response:
    {
        "success": true,
        "translation": "kasa",
        "source": "vocabulary",
        "confidence": 1.0,
        "examples": [{"original": "A minha casa é bonita", "translated": "Ña kasa bonitu"}],
        "degraded": false
    }
    """
    try:
        data = request.get_json(silent=True)

        # Validate required fields
        if not data:
            return jsonify({
                'success': False,
                'error': 'No JSON data provided'
            }), 400

        if not isinstance(data, dict):
            return jsonify({
                'success': False,
                'error': 'Request body must be a JSON object'
            }), 400

        text = data.get('text')
        from_lang = data.get('from_lang')
        to_lang = data.get('to_lang')

        if text is not None and not isinstance(text, str):
            return jsonify({
                'success': False,
                'error': 'Field text must be a string'
            }), 400

        if not text or not text.strip():
            return jsonify({
                'success': False,
                'error': 'Missing required field: text'
            }), 400

        for field_name, code in (('from_lang', from_lang), ('to_lang', to_lang)):
            if not code:
                return jsonify({
                    'success': False,
                    'error': f'Missing required field: {field_name}'
                }), 400
            if not isinstance(code, str) or not is_supported_code(code):
                return jsonify({
                    'success': False,
                    'error': f'Unsupported language: {code}'
                }), 400

        resolver = current_app.extensions['translation_resolver']
        result = resolver.translate(text, from_lang, to_lang)

        return jsonify({'success': True, **result.to_dict()}), 200

    except ValueError as e:
        logger.error(f"Translation service misconfigured: {e}")
        return jsonify({
            'success': False,
            'error': f'Translation service configuration error: {str(e)}'
        }), 500
    except Exception as e:
        logger.error(f"Translation failed: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'error': f'Server error: {str(e)}'
        }), 500


@bp.route('/ai', methods=['POST'])
def translate_with_ai():
    """
    Translate text with the LLM only. This is the endpoint the "http"
    remote translator of another deployment can point at.

    Request body:
    {
        "text": "Eu gosto de ler livros",
        "fromLang": "pt",
        "toLang": "kriol"
    }

    Response:
    {
        "translation": "...",
        "source": "ai",
        "confidence": 0.95
    }
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    text = data.get('text')
    from_lang = data.get('fromLang')
    to_lang = data.get('toLang')

    if not text or not from_lang or not to_lang:
        return jsonify({'error': 'Missing required parameters: text, fromLang, toLang'}), 400
    if not all(isinstance(value, str) for value in (text, from_lang, to_lang)):
        return jsonify({'error': 'Parameters text, fromLang and toLang must be strings'}), 400

    try:
        result = LLMTranslationService().translate(
            text, get_language_name(from_lang), get_language_name(to_lang)
        )
    except ValueError as e:
        logger.error(f"LLM provider is not configured: {e}")
        return jsonify({'error': 'AI service not configured'}), 500
    except RemoteTranslationError as e:
        logger.error(f"AI translation failed: {e}")
        return jsonify({'error': 'Translation service error'}), 502

    return jsonify({
        'translation': result.translation,
        'source': 'ai',
        'confidence': result.confidence
    }), 200
