import pytest
from brewmind.schemas import ChatTurn
from brewmind.services.conversation import (
    InvalidChatRequest,
    build_provider_request,
    map_role,
    parse_chat_request,
    to_provider_messages,
    to_relay_response,
    to_turns,
)
from brewmind.services.persona import MAX_OUTPUT_TOKENS, SYSTEM_PROMPT


def normalize(body):
    return [m.model_dump() for m in to_provider_messages(to_turns(parse_chat_request(body)))]


def test_message_and_history_matches_messages_shape():
    history = [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hey there!"},
    ]
    simple = normalize({"message": "What plans do you offer?", "history": history})
    openai_style = normalize({"messages": history + [{"role": "user", "content": "What plans do you offer?"}]})
    assert simple == openai_style
    assert [m["role"] for m in simple] == ["user", "model", "user"]


def test_message_without_history():
    assert normalize({"message": "hello"}) == [{"role": "user", "parts": [{"text": "hello"}]}]


@pytest.mark.parametrize("role, expected", [
    ("assistant", "model"),
    ("user", "user"),
    ("system", "user"),
    ("model", "user"),
    (None, "user"),
    (42, "user"),
])
def test_map_role(role, expected):
    assert map_role(role) == expected


def test_content_segments_joined_with_newlines():
    assert ChatTurn(role="user", content=["line one", "line two"]).text() == "line one\nline two"


def test_missing_content_becomes_empty_text():
    assert ChatTurn(role="user").text() == ""
    assert ChatTurn(role="user", content=7).text() == "7"


def test_messages_key_wins_even_when_empty():
    assert to_turns(parse_chat_request({"messages": [], "message": "ignored"})) == []


@pytest.mark.parametrize("body", [{}, {"message": ""}, {"history": []}, None, [], "hello", {"messages": "nope"}])
def test_invalid_bodies_rejected(body):
    with pytest.raises(InvalidChatRequest):
        to_turns(parse_chat_request(body))


def test_provider_request_carries_persona():
    payload = build_provider_request([ChatTurn(role="user", content="Where's my order?")])
    assert payload["systemInstruction"] == {"parts": [{"text": SYSTEM_PROMPT}]}
    assert payload["generationConfig"] == {"maxOutputTokens": MAX_OUTPUT_TOKENS}
    assert payload["contents"] == [{"role": "user", "parts": [{"text": "Where's my order?"}]}]
    assert "Beanbot" in SYSTEM_PROMPT


def test_relay_response_joins_non_empty_parts():
    data = {"candidates": [{"content": {"parts": [{"text": "Hi!"}, {"text": ""}, {"inlineData": {}}, {"text": "Bye."}]}}]}
    response = to_relay_response(data, "gemini-2.0-flash")
    assert response.reply == "Hi!\nBye."
    assert response.response == response.message == response.reply
    assert response.choices[0].message.role == "assistant"
    assert response.choices[0].message.content == "Hi!\nBye."
    assert len(response.content) == 4
    assert response.usedModel == "gemini-2.0-flash"


def test_relay_response_without_candidates():
    response = to_relay_response({}, "gemini-2.5-flash")
    assert response.reply == ""
    assert response.content == []


def test_messages_win_over_malformed_history():
    turns = to_turns(parse_chat_request({"messages": [{"role": "user", "content": "hi"}], "history": "x"}))
    assert [(t.role, t.content) for t in turns] == [("user", "hi")]


def test_malformed_history_rejected_on_message_path():
    request = parse_chat_request({"message": "hi", "history": "x"})
    with pytest.raises(InvalidChatRequest):
        to_turns(request)


def test_relay_response_stringifies_non_text_parts():
    data = {"candidates": [{"content": {"parts": [{"text": 5}, {"text": "cups"}]}}]}
    assert to_relay_response(data, "gemini-2.5-flash").reply == "5\ncups"
