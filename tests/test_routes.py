"""
Test HTTP routes

Tests the JSON endpoints:
- GET / and GET /health
- POST /translation/translate and POST /translation/ai
- /api/languages, /api/detect, /api/spellcheck, /api/spellcheck/accept
- /api/vocabulary/top|search|similar|exists
- POST /api/usage/check
"""

import sys
import os
import pytest
from unittest.mock import MagicMock, patch

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models.translation import RemoteTranslation
from services.errors import RemoteTranslationError


@pytest.fixture
def app():
    """Create application for testing"""
    return create_app('testing')


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def remote_translator(app):
    """Install a mocked remote translator on the app's resolver"""
    remote = MagicMock(return_value=RemoteTranslation(translation='N ka sibi', confidence=0.9))
    app.extensions['translation_resolver'].remote_translator = remote
    return remote


class TestAppRoutes:

    def test_home(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert response.get_json()['message'] == 'Welcome to NoCrioulo!'

    def test_health(self, client):
        data = client.get('/health').get_json()

        assert data['status'] == 'healthy'
        assert data['vocabulary'] == {'pt_to_kriol': 99, 'kriol_to_pt': 59, 'phrases': 15}
        assert data['remote_translator'] == 'disabled'


class TestTranslateRoute:

    def test_vocabulary_translation(self, client):
        response = client.post('/translation/translate', json={
            'text': 'casa',
            'from_lang': 'pt',
            'to_lang': 'kriol'
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['success'] is True
        assert data['translation'] == 'kasa'
        assert data['source'] == 'vocabulary'
        assert data['confidence'] == 1.0
        assert data['examples'][0]['translated'] == 'Ña kasa bonitu'
        assert 'suggestions' not in data

    def test_phrase_translation(self, client):
        data = client.post('/translation/translate', json={
            'text': 'Bom dia',
            'from_lang': 'pt',
            'to_lang': 'en'
        }).get_json()

        assert data['translation'] == 'Good morning'
        assert data['source'] == 'phrase'

    def test_ai_fallback(self, client, remote_translator):
        data = client.post('/translation/translate', json={
            'text': 'xyzzy plugh',
            'from_lang': 'pt',
            'to_lang': 'kriol'
        }).get_json()

        assert data['source'] == 'ai'
        assert data['translation'] == 'N ka sibi'
        assert data['degraded'] is False
        remote_translator.assert_called_once()

    def test_degraded_without_remote_translator(self, client):
        data = client.post('/translation/translate', json={
            'text': 'xyzzy',
            'from_lang': 'kriol',
            'to_lang': 'pt'
        }).get_json()

        assert data['success'] is True
        assert data['translation'] == 'xyzzy'
        assert data['degraded'] is True

    def test_remote_failure_is_not_an_error(self, app, client):
        app.extensions['translation_resolver'].remote_translator = MagicMock(
            side_effect=RemoteTranslationError('Translation endpoint returned 503', status_code=503)
        )
        response = client.post('/translation/translate', json={
            'text': 'xyzzy',
            'from_lang': 'pt',
            'to_lang': 'kriol'
        })

        assert response.status_code == 200
        assert response.get_json()['source'] == 'vocabulary'

    def test_missing_body(self, client):
        response = client.post('/translation/translate')
        assert response.status_code == 400

    @pytest.mark.parametrize("payload, message", [
        ({'text': '  ', 'from_lang': 'pt', 'to_lang': 'kriol'}, 'text'),
        ({'text': 'casa', 'to_lang': 'kriol'}, 'from_lang'),
        ({'text': 'casa', 'from_lang': 'pt'}, 'to_lang'),
        ({'text': 'casa', 'from_lang': 'pt', 'to_lang': 'xx'}, 'Unsupported language: xx'),
    ])
    def test_invalid_requests(self, client, payload, message):
        response = client.post('/translation/translate', json=payload)
        data = response.get_json()

        assert response.status_code == 400
        assert data['success'] is False
        assert message in data['error']

    def test_misconfigured_remote_translator(self, app, client):
        app.extensions['translation_resolver'].remote_translator = MagicMock(
            side_effect=ValueError('MISTRAL_API_KEY not found in environment variables')
        )
        response = client.post('/translation/translate', json={
            'text': 'xyzzy',
            'from_lang': 'pt',
            'to_lang': 'kriol'
        })

        assert response.status_code == 500
        assert 'configuration error' in response.get_json()['error']


class TestAITranslateRoute:

    @patch('routes.translation.LLMTranslationService')
    def test_success(self, mock_service_class, client):
        mock_service_class.return_value.translate.return_value = RemoteTranslation(
            translation='Bon dia', confidence=0.95
        )

        response = client.post('/translation/ai', json={
            'text': 'Bom dia',
            'fromLang': 'pt',
            'toLang': 'kriol'
        })

        assert response.status_code == 200
        assert response.get_json() == {'translation': 'Bon dia', 'source': 'ai', 'confidence': 0.95}
        mock_service_class.return_value.translate.assert_called_once_with(
            'Bom dia', 'Português', 'Crioulo da Guiné-Bissau (Guineense/Kriol)'
        )

    def test_missing_parameters(self, client):
        response = client.post('/translation/ai', json={'text': 'Bom dia'})
        assert response.status_code == 400

    @patch('routes.translation.LLMTranslationService')
    def test_not_configured(self, mock_service_class, client):
        mock_service_class.return_value.translate.side_effect = ValueError('MISTRAL_API_KEY not found')

        response = client.post('/translation/ai', json={'text': 'a', 'fromLang': 'pt', 'toLang': 'kriol'})

        assert response.status_code == 500
        assert response.get_json()['error'] == 'AI service not configured'

    @patch('routes.translation.LLMTranslationService')
    def test_provider_failure(self, mock_service_class, client):
        mock_service_class.return_value.translate.side_effect = RemoteTranslationError('timeout')

        response = client.post('/translation/ai', json={'text': 'a', 'fromLang': 'pt', 'toLang': 'kriol'})

        assert response.status_code == 502


class TestLanguageRoutes:

    def test_languages(self, client):
        data = client.get('/api/languages').get_json()

        assert data['count'] == 6
        assert 'kriol' in [lang['code'] for lang in data['data']]

    @pytest.mark.parametrize("text, expected", [
        ("N' sta bon", 'kriol'),
        ("Eu não quero comer", 'pt'),
        ("x", None),
        ("", None),
    ])
    def test_detect(self, client, text, expected):
        data = client.post('/api/detect', json={'text': text}).get_json()
        assert data['language'] == expected


class TestSpellCheckRoutes:

    def test_spellcheck(self, client):
        data = client.post('/api/spellcheck', json={'text': 'a cassa', 'lang': 'pt'}).get_json()

        assert data['count'] == 1
        assert data['data'][0]['original'] == 'cassa'
        assert data['data'][0]['suggestion'] == 'casa'

    def test_spellcheck_requires_lang(self, client):
        response = client.post('/api/spellcheck', json={'text': 'cassa'})
        assert response.status_code == 400

    def test_accept(self, client):
        data = client.post('/api/spellcheck/accept', json={
            'text': 'Kaza grandi, kaza!',
            'original': 'kaza',
            'suggestion': 'kasa'
        }).get_json()

        assert data['text'] == 'kasa grandi, kasa!'

    def test_accept_requires_fields(self, client):
        response = client.post('/api/spellcheck/accept', json={'text': 'kaza'})
        assert response.status_code == 400


class TestVocabularyRoutes:

    def test_top_words(self, client):
        data = client.get('/api/vocabulary/top?lang=kriol&limit=3').get_json()
        assert [entry['word'] for entry in data['data']] == ['kasa', 'ka', 'sta']

    def test_top_words_limit_is_capped(self, client):
        data = client.get('/api/vocabulary/top?lang=kriol&limit=1000').get_json()
        assert data['count'] == 50

    def test_top_words_unsupported_lang(self, client):
        assert client.get('/api/vocabulary/top?lang=en').status_code == 400

    def test_search(self, client):
        data = client.get('/api/vocabulary/search?word=casa&from_lang=pt&to_lang=kriol').get_json()
        assert data['data']['translation'] == 'kasa'

    def test_search_not_found(self, client):
        response = client.get('/api/vocabulary/search?word=xyzzy&from_lang=pt&to_lang=kriol')
        assert response.status_code == 404

    def test_similar(self, client):
        data = client.get('/api/vocabulary/similar?word=kaza&lang=kriol').get_json()
        assert data['data'][0] == {'word': 'kasa', 'similarity': 0.75}

    def test_exists(self, client):
        assert client.get('/api/vocabulary/exists?word=kasa&lang=kriol').get_json()['exists'] is True
        assert client.get('/api/vocabulary/exists?word=kasa&lang=pt').get_json()['exists'] is False
        assert client.get('/api/vocabulary/exists?word=kasa&lang=en').status_code == 400


class TestUsageRoute:

    def test_premium(self, client):
        data = client.post('/api/usage/check', json={'plan': 'premium'}).get_json()
        assert data['can_translate'] is True

    def test_free_limit_reached(self, client):
        data = client.post('/api/usage/check', json={
            'plan': 'free',
            'translations_used': 10,
            'email_verified': True
        }).get_json()
        assert data['can_translate'] is False

    @pytest.mark.parametrize("payload", [{'plan': 'gold'}, ['free']])
    def test_invalid_usage(self, client, payload):
        response = client.post('/api/usage/check', json=payload)
        assert response.status_code == 400


class TestMalformedBodies:
    """Non-object bodies and non-string fields are rejected with 400"""

    @pytest.mark.parametrize("url", [
        '/api/detect',
        '/api/spellcheck',
        '/api/spellcheck/accept',
        '/translation/translate',
        '/translation/ai',
    ])
    def test_array_body(self, client, url):
        response = client.post(url, json=["N' sta bon"])
        assert response.status_code == 400

    def test_translate_non_string_text(self, client):
        response = client.post('/translation/translate', json={
            'text': 123,
            'from_lang': 'pt',
            'to_lang': 'kriol'
        })

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Field text must be a string'

    def test_translate_non_string_language(self, client):
        response = client.post('/translation/translate', json={
            'text': 'casa',
            'from_lang': ['pt'],
            'to_lang': 'kriol'
        })
        assert response.status_code == 400

    def test_ai_non_string_text(self, client):
        response = client.post('/translation/ai', json={'text': 5, 'fromLang': 'pt', 'toLang': 'kriol'})
        assert response.status_code == 400

    def test_detect_non_string_text(self, client):
        assert client.post('/api/detect', json={'text': 42}).status_code == 400

    @pytest.mark.parametrize("payload", [
        {'text': 123, 'lang': 'pt'},
        {'text': 'cassa', 'lang': ['pt']},
    ])
    def test_spellcheck_non_string_fields(self, client, payload):
        assert client.post('/api/spellcheck', json=payload).status_code == 400

    def test_accept_non_string_original(self, client):
        response = client.post('/api/spellcheck/accept', json={
            'text': 'kaza',
            'original': 7,
            'suggestion': 'kasa'
        })
        assert response.status_code == 400


class TestConfiguredUsageLimit:
    """FREE_TRANSLATIONS_LIMIT from the app config drives the usage gate"""

    def test_config_limit_applies_when_missing(self, app, client):
        app.config['FREE_TRANSLATIONS_LIMIT'] = 3

        data = client.post('/api/usage/check', json={
            'plan': 'free',
            'translations_used': 5,
            'email_verified': True
        }).get_json()

        assert data['can_translate'] is False

    def test_explicit_limit_wins(self, app, client):
        app.config['FREE_TRANSLATIONS_LIMIT'] = 3

        data = client.post('/api/usage/check', json={
            'plan': 'basic',
            'translations_used': 5,
            'translations_limit': 100,
            'email_verified': True
        }).get_json()

        assert data['can_translate'] is True

    @pytest.mark.parametrize("used, expected", [(2, True), (3, False)])
    def test_anonymous_visitor(self, app, client, used, expected):
        app.config['FREE_TRANSLATIONS_LIMIT'] = 3

        data = client.post('/api/usage/check', json={
            'anonymous': True,
            'translations_used': used
        }).get_json()

        assert data['can_translate'] is expected
