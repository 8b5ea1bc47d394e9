import pytest

from klusuwaqn.services.game_service import GameService, build_action, get_game_service
from klusuwaqn.models import SelectSlot, StartNewGame


@pytest.fixture
def seeded(collections):
    """Three September words and one January word in the catalog."""
    for mikmaq, english, month in [
        ("Ni'n", 'I', 'September'),
        ("Ki'l", 'You', 'September'),
        ('Teluisi', 'My name is', 'September'),
        ("Ta'ta", 'Dad', 'January'),
    ]:
        collections.words.insert_one({
            'mikmaq': mikmaq, 'english': english, 'startMonth': month,
            'imagePath': f'{mikmaq}.png', 'audioPath': f'{mikmaq}.mp3'
        })
    return collections


def start(client, month='September', seed=7):
    response = client.post('/api/matching-game', json={'month': month, 'seed': seed})
    assert response.status_code == 201
    body = response.get_json()
    return body['game_id'], body['state']


def act(client, game_id, action, **payload):
    return client.post(f'/api/matching-game/{game_id}/actions', json={'action': action, **payload})


def target_image(game_id):
    return get_game_service().get_game_state(game_id).grid.target_image


def test_new_game_returns_first_round(client, seeded):
    game_id, state = start(client)

    assert state['phase'] == 'playing'
    assert state['month'] == 'September'
    assert state['month_label'] == "Wikumkewiku's (Sep)"
    assert state['total_rounds'] == 3
    assert state['round_display'] == '0/3'
    assert len(state['grid']['slots']) == 9
    assert sum(1 for slot in state['grid']['slots'] if slot is None) == 6
    assert state['grid']['target_image'] is None
    assert state['grid']['target_audio_url'].startswith('/public/')


def test_new_game_defaults_to_september(client, seeded):
    response = client.post('/api/matching-game', json={})
    assert response.get_json()['state']['month'] == 'September'


def test_new_game_rejects_unknown_month(client, seeded):
    response = client.post('/api/matching-game', json={'month': 'Smarch'})
    assert response.status_code == 400


def test_empty_month_is_reported(client, seeded):
    _, state = start(client, month='May')

    assert state['empty_word_set'] is True
    assert state['grid'] is None


def test_correct_pick_then_advance(client, seeded):
    game_id, _ = start(client)

    response = act(client, game_id, 'select_slot', image_ref=target_image(game_id))
    state = response.get_json()['state']
    assert state['phase'] == 'showing_success'
    assert state['success_count'] == 1
    assert state['grid']['target_image'] is not None

    state = act(client, game_id, 'advance_round').get_json()['state']
    assert state['phase'] == 'playing'
    assert state['round_index'] == 1


def test_two_wrong_picks_reveal_answer_and_restart(client, seeded):
    game_id, _ = start(client)

    assert act(client, game_id, 'select_slot', image_ref='wrong').get_json()['state']['phase'] == 'showing_warning'
    assert act(client, game_id, 'acknowledge_warning').get_json()['state']['phase'] == 'playing'

    state = act(client, game_id, 'select_slot', image_ref='wrong').get_json()['state']
    assert state['phase'] == 'showing_failure'
    assert state['correct_word']['mikmaq'] in {"Ni'n", "Ki'l", 'Teluisi'}

    state = act(client, game_id, 'restart_round').get_json()['state']
    assert state['phase'] == 'playing'
    assert state['success_count'] == 0
    assert state['round_index'] == 0


def test_first_wrong_pick_keeps_answer_hidden(client, seeded):
    game_id, _ = start(client, seed=3)

    state = act(client, game_id, 'select_slot', image_ref='nope.png').get_json()['state']
    assert state['phase'] == 'showing_warning'
    assert state['grid']['target_image'] is None
    assert state['correct_word'] is None

    state = act(client, game_id, 'acknowledge_warning').get_json()['state']
    assert state['grid']['target_image'] is None

    state = client.get(f'/api/matching-game/{game_id}/state').get_json()['state']
    assert state['grid']['target_image'] is None


def test_play_through_completes(client, seeded):
    game_id, _ = start(client)

    for _ in range(3):
        act(client, game_id, 'select_slot', image_ref=target_image(game_id))
        state = act(client, game_id, 'advance_round').get_json()['state']

    assert state['phase'] == 'completed'
    assert state['success_count'] == 3
    assert state['grid'] is None


def test_action_in_wrong_phase_is_ignored(client, seeded):
    game_id, before = start(client)

    state = act(client, game_id, 'advance_round').get_json()['state']
    assert state == before


def test_select_month_action(client, seeded):
    game_id, _ = start(client)

    state = act(client, game_id, 'select_month', month='January').get_json()['state']
    assert state['month'] == 'January'
    assert state['total_rounds'] == 1
    assert sum(1 for slot in state['grid']['slots'] if slot is None) == 8


def test_unknown_action_is_rejected(client, seeded):
    game_id, _ = start(client)

    response = act(client, game_id, 'fly_away')
    assert response.status_code == 400


def test_select_slot_requires_image_ref(client, seeded):
    game_id, _ = start(client)
    assert act(client, game_id, 'select_slot').status_code == 400


def test_action_requires_body(client, seeded):
    game_id, _ = start(client)
    assert client.post(f'/api/matching-game/{game_id}/actions').status_code == 400


def test_missing_game_returns_404(client):
    assert client.get('/api/matching-game/nope/state').status_code == 404
    assert act(client, 'nope', 'advance_round').status_code == 404
    assert client.delete('/api/matching-game/nope').status_code == 404


def test_get_state_and_delete(client, seeded):
    game_id, state = start(client)

    assert client.get(f'/api/matching-game/{game_id}/state').get_json()['state'] == state
    assert client.delete(f'/api/matching-game/{game_id}').get_json() == {'success': True}
    assert client.get(f'/api/matching-game/{game_id}/state').status_code == 404


def test_months_lists_months_with_words(client, seeded):
    months = client.get('/api/matching-game/months').get_json()['months']

    assert [m['value'] for m in months] == ['September', 'January']
    assert months[0]['word_count'] == 3
    assert months[1]['label'] == "Punamujuiku's (Jan)"


def test_health_check(client):
    body = client.get('/api/health').get_json()

    assert body['status'] == 'healthy'
    assert body['auth_available'] is True


def test_game_without_word_service_uses_empty_catalog(monkeypatch):
    import klusuwaqn.services.game_service as game_service_module
    monkeypatch.setattr(game_service_module, 'get_word_service', lambda: None)

    service = GameService()
    state = service.get_game_state(service.create_game('September'))

    assert state.is_empty


def test_build_action():
    assert build_action('select_slot', {'image_ref': 'a.png'}) == SelectSlot('a.png')
    assert build_action('start_new_game') == StartNewGame()
    with pytest.raises(ValueError):
        build_action('select_month', {})
