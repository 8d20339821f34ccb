from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from models.user import UserUsage
from services.language_detection_service import detect_language_hint
from services.language_utils import SUPPORTED_LANGUAGES, is_spell_checkable
from services.spell_check_service import accept_suggestion, check_spelling
from services.usage_gate_service import anonymous_can_translate, can_translate
from services.vocabulary_service import (
    find_similar_words,
    get_top_words,
    search_vocabulary,
    word_exists
)

bp = Blueprint('api', __name__, url_prefix='/api')

MAX_TOP_WORDS = 50


def _bad_request(message):
    return jsonify({'success': False, 'error': message}), 400


def _json_object():
    """Request body as a dict: {} when absent, None when it is not a JSON object"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _vocabulary_lang(field_name='lang'):
    """Read a vocabulary language from the query string; None if missing or unsupported"""
    lang = request.args.get(field_name)
    return lang if is_spell_checkable(lang) else None


@bp.route('/languages', methods=['GET'])
def get_languages():
    """
    Get all supported languages.

    Returns:
        JSON array of language objects with code, name, flag, native
    """
    languages_data = [lang.model_dump() for lang in SUPPORTED_LANGUAGES]

    return jsonify({
        'success': True,
        'data': languages_data,
        'count': len(languages_data)
    }), 200


@bp.route('/detect', methods=['POST'])
def detect():
    """
    Detect whether text is Kriol or Portuguese.

    Request body: {"text": "N' sta bon"}
    Response: {"success": true, "language": "kriol"} (null when unknown or too short)
    """
    data = _json_object()
    if data is None:
        return _bad_request('Request body must be a JSON object')

    text = data.get('text') or ''
    if not isinstance(text, str):
        return _bad_request('Field text must be a string')

    return jsonify({'success': True, 'language': detect_language_hint(text)}), 200


@bp.route('/spellcheck', methods=['POST'])
def spellcheck():
    """
    Spelling suggestions for Kriol or Portuguese text.

    Request body: {"text": "a kaza", "lang": "kriol"}
    """
    data = _json_object()
    if data is None:
        return _bad_request('Request body must be a JSON object')

    text = data.get('text') or ''
    lang = data.get('lang')

    if not lang:
        return _bad_request('Missing required field: lang')
    if not isinstance(text, str) or not isinstance(lang, str):
        return _bad_request('Fields text and lang must be strings')

    suggestions = check_spelling(text, lang) if text.strip() else []

    return jsonify({
        'success': True,
        'data': [s.model_dump() for s in suggestions],
        'count': len(suggestions)
    }), 200


@bp.route('/spellcheck/accept', methods=['POST'])
def spellcheck_accept():
    """
    Apply a suggestion to every whole-word occurrence in the text.

    Request body: {"text": "kaza grandi", "original": "kaza", "suggestion": "kasa"}
    """
    data = _json_object()
    if data is None:
        return _bad_request('Request body must be a JSON object')

    text = data.get('text')
    original = data.get('original')
    suggestion = data.get('suggestion')

    if text is None or not original or suggestion is None:
        return _bad_request('Missing required fields: text, original, suggestion')
    if not all(isinstance(value, str) for value in (text, original, suggestion)):
        return _bad_request('Fields text, original and suggestion must be strings')

    return jsonify({
        'success': True,
        'text': accept_suggestion(text, original, suggestion)
    }), 200


@bp.route('/vocabulary/top', methods=['GET'])
def top_words():
    """
    Most frequent words of a vocabulary.

    Query params:
        - lang: 'kriol' (default) or 'pt'
        - limit: number of entries (default: 5)
    """
    lang = request.args.get('lang', 'kriol')
    if not is_spell_checkable(lang):
        return _bad_request(f'Unsupported vocabulary language: {lang}')

    limit = request.args.get('limit', 5, type=int)
    limit = max(0, min(limit, MAX_TOP_WORDS))

    entries = get_top_words(lang, limit)

    return jsonify({
        'success': True,
        'data': [entry.model_dump() for entry in entries],
        'count': len(entries)
    }), 200


@bp.route('/vocabulary/search', methods=['GET'])
def search():
    """
    Exact or variation lookup of a single word.

    Query params: word, from_lang, to_lang
    """
    word = request.args.get('word')
    from_lang = request.args.get('from_lang')
    to_lang = request.args.get('to_lang')

    if not word or not from_lang or not to_lang:
        return _bad_request('Missing required params: word, from_lang, to_lang')

    entry = search_vocabulary(word, from_lang, to_lang)
    if entry is None:
        return jsonify({'success': False, 'error': f'No entry found for: {word}'}), 404

    return jsonify({'success': True, 'data': entry.model_dump()}), 200


@bp.route('/vocabulary/similar', methods=['GET'])
def similar():
    """
    Vocabulary words similar to a spelling.

    Query params: word, lang ('kriol' or 'pt')
    """
    word = request.args.get('word')
    lang = _vocabulary_lang()

    if not word or lang is None:
        return _bad_request('Missing or invalid params: word, lang')

    candidates = find_similar_words(word, lang)

    return jsonify({
        'success': True,
        'data': [c.model_dump() for c in candidates],
        'count': len(candidates)
    }), 200


@bp.route('/vocabulary/exists', methods=['GET'])
def exists():
    """Query params: word, lang ('kriol' or 'pt')"""
    word = request.args.get('word')
    lang = _vocabulary_lang()

    if not word or lang is None:
        return _bad_request('Missing or invalid params: word, lang')

    return jsonify({'success': True, 'exists': word_exists(word, lang)}), 200


@bp.route('/usage/check', methods=['POST'])
def usage_check():
    """
    Check the translation allowance for the given usage counters.

    Request body:
    {
        "plan": "free",
        "translations_used": 3,
        "translations_limit": 10,
        "email_verified": true
    }

    A missing translations_limit defaults to FREE_TRANSLATIONS_LIMIT from the
    app config. Visitors who are not signed in send {"anonymous": true,
    "translations_used": 3} and only the counter is checked.
    """
    data = _json_object()
    if data is None:
        return _bad_request('Usage data must be a JSON object')

    data = dict(data)
    anonymous = data.pop('anonymous', False) is True
    data.setdefault('translations_limit', current_app.config['FREE_TRANSLATIONS_LIMIT'])

    try:
        usage = UserUsage(**data)
    except ValidationError as e:
        return _bad_request(f'Invalid usage data: {e.error_count()} error(s)')

    if anonymous:
        allowed = anonymous_can_translate(usage.translations_used, usage.translations_limit)
    else:
        allowed = can_translate(usage)

    return jsonify({'success': True, 'can_translate': allowed}), 200
