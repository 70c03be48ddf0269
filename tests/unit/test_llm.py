"""
Unit tests for secondbrain/llm.py and secondbrain/ask.py

The OpenAI client is mocked; no request leaves the process.
"""

from unittest.mock import Mock, patch

import pytest

from secondbrain.ask import ask_question
from secondbrain.llm import (
    ANSWER_MAX_TOKENS, NO_ANSWER_PLACEHOLDER, LLMError, check_health, generate,
)
from secondbrain.prompt import ValidationError


def _completion(*contents):
    response = Mock()
    response.choices = [Mock(message=Mock(content=c)) for c in contents]
    return response


@pytest.fixture
def openai_key(monkeypatch):
    monkeypatch.setenv('OPENAI_API_KEY', 'sk-test')


@pytest.fixture
def mock_openai():
    with patch('secondbrain.llm.OpenAI') as mock_cls:
        client = mock_cls.return_value
        client.chat.completions.create.return_value = _completion('Paris in June.')
        yield mock_cls


class TestGenerate:
    """Tests for generate()"""

    @pytest.mark.unit
    def test_returns_first_choice(self, openai_key, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _completion('first', 'second')
        assert generate('prompt') == 'first'

    @pytest.mark.unit
    def test_request_shape(self, openai_key, mock_openai, monkeypatch):
        monkeypatch.setenv('OPENAI_MODEL', 'test-model')
        monkeypatch.setenv('OPENAI_BASE_URL', 'https://llm.example.com/v1')

        generate('hello there')

        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs['model'] == 'test-model'
        assert kwargs['max_tokens'] == ANSWER_MAX_TOKENS == 1000
        assert kwargs['messages'] == [{'role': 'user', 'content': 'hello there'}]
        client_kwargs = mock_openai.call_args.kwargs
        assert client_kwargs['api_key'] == 'sk-test'
        assert client_kwargs['base_url'] == 'https://llm.example.com/v1'
        assert client_kwargs['timeout'] > 0

    @pytest.mark.unit
    def test_no_choices_is_placeholder(self, openai_key, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _completion()
        assert generate('prompt') == NO_ANSWER_PLACEHOLDER == 'No answer generated'

    @pytest.mark.unit
    def test_empty_content_is_placeholder(self, openai_key, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _completion(None)
        assert generate('prompt') == NO_ANSWER_PLACEHOLDER

    @pytest.mark.unit
    def test_api_error_raises_llm_error(self, openai_key, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = RuntimeError('401 unauthorized')
        with pytest.raises(LLMError):
            generate('prompt')

    @pytest.mark.unit
    def test_missing_key_raises_llm_error(self, mock_openai):
        with pytest.raises(LLMError):
            generate('prompt')
        mock_openai.assert_not_called()


class TestCheckHealth:
    """Tests for check_health()"""

    @pytest.mark.unit
    def test_ready(self, openai_key, mock_openai):
        assert check_health() is True
        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs['max_tokens'] == 10

    @pytest.mark.unit
    @pytest.mark.parametrize('error', [RuntimeError('boom'), ConnectionError('down'), KeyError('x')])
    def test_not_ready_on_any_error(self, openai_key, mock_openai, error):
        mock_openai.return_value.chat.completions.create.side_effect = error
        assert check_health() is False

    @pytest.mark.unit
    def test_not_ready_without_key(self, mock_openai):
        assert check_health() is False


class TestAskQuestion:
    """Tests for ask_question()"""

    @pytest.mark.unit
    @patch('secondbrain.ask.generate', return_value='You saved the Eiffel video.')
    @patch('secondbrain.content_enricher.fetch_latest_news', return_value='News API key not configured')
    @patch('secondbrain.content_enricher.fetch_youtube_content', return_value='')
    def test_end_to_end(self, mock_youtube, mock_news, mock_generate, trip_note, eiffel_item):
        question = 'What did I save about Paris?'

        answer = ask_question([trip_note], [eiffel_item], question)

        prompt = mock_generate.call_args.args[0]
        for expected in ('Note: Trip', 'Content: Paris in June', 'YOUTUBE: Eiffel',
                         'User Notes: favorite', question):
            assert expected in prompt
        assert answer.text == 'You saved the Eiffel video.'
        assert answer.sources.notes_count == 1
        assert answer.sources.content_count == 1
        assert answer.sources.model_dump(by_alias=True) == {'notesCount': 1, 'contentCount': 1}

    @pytest.mark.unit
    @patch('secondbrain.ask.generate')
    @patch('secondbrain.ask.build_prompt')
    def test_empty_question_rejected_before_anything(self, mock_build, mock_generate):
        with pytest.raises(ValidationError):
            ask_question([], [], '   ')
        mock_build.assert_not_called()
        mock_generate.assert_not_called()

    @pytest.mark.unit
    @patch('secondbrain.ask.generate', side_effect=LLMError('AI request failed'))
    def test_generation_failure_propagates(self, mock_generate, trip_note):
        with pytest.raises(LLMError):
            ask_question([trip_note], [], 'Where?')

    @pytest.mark.unit
    @patch('secondbrain.ask.generate', return_value='ok')
    @patch('secondbrain.ask.build_prompt', return_value='prompt')
    def test_keys_and_workers_from_environment(self, mock_build, mock_generate, monkeypatch):
        monkeypatch.setenv('YOUTUBE_API_KEY', 'yt')
        monkeypatch.setenv('NEWS_API_KEY', 'news')
        monkeypatch.setenv('BRAIN_ENRICH_WORKERS', '4')

        ask_question([], [], 'Q?')

        kwargs = mock_build.call_args.kwargs
        assert kwargs['youtube_api_key'] == 'yt'
        assert kwargs['news_api_key'] == 'news'
        assert kwargs['workers'] == 4
