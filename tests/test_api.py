from guessing_game import create_app
from guessing_game.config import TestingConfig
from guessing_game.services import MemoryStorage


def register(client, email='alice@example.com', password='secret1', name='Alice'):
    return client.post('/api/auth/register', json={'name': name, 'email': email, 'password': password})


def test_register_and_profile(client):
    res = register(client)
    assert res.status_code == 201
    user = res.get_json()['user']
    assert user['name'] == 'Alice'
    assert 'password' not in user

    res = client.get('/api/auth/me')
    assert res.status_code == 200
    assert res.get_json()['user']['email'] == 'alice@example.com'


def test_register_duplicate_email(client):
    register(client)
    res = register(client, name='Again')
    assert res.status_code == 409
    assert res.get_json()['error'] == 'User with this email already exists'

    users = client.get('/api/auth/users').get_json()['users']
    assert len(users) == 1


def test_register_missing_fields_and_body(client):
    res = register(client, password='')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Please fill in all fields'

    res = client.post('/api/auth/register')
    assert res.status_code == 400


def test_login_logout_flow(client):
    register(client)
    assert client.post('/api/auth/logout').status_code == 200
    assert client.get('/api/auth/me').status_code == 401

    res = client.post('/api/auth/login', json={'email': 'alice@example.com', 'password': 'wrong'})
    assert res.status_code == 401
    assert client.get('/api/auth/me').status_code == 401

    res = client.post('/api/auth/login', json={'email': 'alice@example.com', 'password': 'secret1'})
    assert res.status_code == 200
    assert 'password' not in res.get_json()['user']
    assert client.get('/api/auth/me').status_code == 200


def test_users_listing_hides_passwords(client):
    register(client)
    register(client, email='bob@example.com', name='Bob')
    users = client.get('/api/auth/users').get_json()['users']
    assert [u['name'] for u in users] == ['Alice', 'Bob']
    assert all('password' not in u for u in users)


def test_guess_flow_updates_leaderboard_and_profile(client):
    register(client)

    res = client.post('/api/game/guess', json={'guess': '10'})
    assert res.status_code == 200
    body = res.get_json()
    assert body['result']['outcome'] == 'too_low'
    assert body['state']['attempts'] == 1
    assert body['state']['can_change_difficulty'] is False
    assert body['state']['answer'] is None

    res = client.post('/api/game/guess', json={'guess': 42})
    body = res.get_json()
    assert body['result']['outcome'] == 'correct'
    assert body['state']['status'] == 'won'
    assert body['state']['answer'] == 42
    assert body['result']['entry']['playerName'] == 'Alice'

    board = client.get('/api/leaderboard').get_json()['leaderboard']
    assert board[0]['attempts'] == 2
    assert board[0]['difficulty'] == 'Medium (1-100)'

    profile = client.get('/api/auth/me').get_json()['user']
    assert profile['gamesPlayed'] == 1
    assert profile['bestScore']['attempts'] == 2


def test_out_of_range_guess(client):
    res = client.post('/api/game/guess', json={'guess': '999'})
    assert res.status_code == 400
    body = res.get_json()
    assert body['error'] == 'Please enter a valid number between 1 and 100'
    assert body['state']['attempts'] == 0


def test_guess_requires_body(client):
    assert client.post('/api/game/guess', json={}).status_code == 400


def test_guess_after_win_is_rejected(client):
    client.post('/api/game/guess', json={'guess': '42'})
    res = client.post('/api/game/guess', json={'guess': '42'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Round is already over'


def test_new_game_changes_difficulty_until_first_guess(client):
    res = client.post('/api/game/new', json={'difficulty': 'easy'})
    assert res.status_code == 200
    assert res.get_json()['state']['max'] == 50

    client.post('/api/game/guess', json={'guess': '1'})
    res = client.post('/api/game/new', json={'difficulty': 'hard'})
    assert res.status_code == 409

    # Restarting on the same tier is still allowed
    res = client.post('/api/game/new', json={'difficulty': 'easy'})
    assert res.status_code == 200
    assert res.get_json()['state']['attempts'] == 0


def test_new_game_unknown_difficulty(client):
    res = client.post('/api/game/new', json={'difficulty': 'legendary'})
    assert res.status_code == 400


def test_leaderboard_limit_param(client):
    for _ in range(3):
        client.post('/api/game/guess', json={'guess': '42'})
        client.post('/api/game/new', json={})
    assert len(client.get('/api/leaderboard').get_json()['leaderboard']) == 3
    assert len(client.get('/api/leaderboard?limit=2').get_json()['leaderboard']) == 2


def test_health(client):
    body = client.get('/api/health').get_json()
    assert body['status'] == 'healthy'
    assert body['logged_in'] is False
    assert body['round_status'] == 'playing'


def test_demo_account_seeded_when_enabled(rng, clock):
    class SeededConfig(TestingConfig):
        SEED_DEMO_ACCOUNT = True

    app = create_app(SeededConfig, storage=MemoryStorage(), rng=rng, clock=clock)
    client = app.test_client()

    res = client.post('/api/auth/login', json={'email': 'demo@example.com', 'password': 'demo123'})
    assert res.status_code == 200
    assert res.get_json()['user']['gamesPlayed'] == 5


def test_oversized_or_non_scalar_guess_is_out_of_range(client):
    for guess in ['9' * 5000, [42], {'value': 42}]:
        res = client.post('/api/game/guess', json={'guess': guess})
        assert res.status_code == 400
        body = res.get_json()
        assert body['error'] == 'Please enter a valid number between 1 and 100'
        assert body['state']['attempts'] == 0


def test_non_object_bodies_are_rejected(client):
    for path in ['/api/auth/register', '/api/auth/login', '/api/game/new', '/api/game/guess']:
        res = client.post(path, json=[1])
        assert res.status_code == 400, path
        assert res.get_json()['success'] is False


def test_new_game_non_string_difficulty(client):
    res = client.post('/api/game/new', json={'difficulty': ['easy']})
    assert res.status_code == 400
    assert client.get('/api/game/state').get_json()['state']['difficulty'] == 'medium'


def test_leaderboard_limit_bounds(client):
    client.post('/api/game/guess', json={'guess': '42'})

    assert client.get('/api/leaderboard?limit=-1').status_code == 400
    assert client.get('/api/leaderboard?limit=0').get_json()['leaderboard'] == []
    assert len(client.get('/api/leaderboard?limit=5').get_json()['leaderboard']) == 1
    assert len(client.get('/api/leaderboard').get_json()['leaderboard']) == 1
