import io
import os


def word_form(**overrides):
    form = {
        'mikmaq': "Ta'ta",
        'english': 'Dad',
        'startMonth': 'January',
        'image': (io.BytesIO(b'png-bytes'), 'tata.png'),
        'audio': (io.BytesIO(b'mp3-bytes'), 'tata.mp3'),
    }
    form.update(overrides)
    return {key: value for key, value in form.items() if value is not None}


def create_word(client, auth_headers, **overrides):
    return client.post(
        '/api/words', data=word_form(**overrides),
        headers=auth_headers, content_type='multipart/form-data'
    )


def test_list_words_starts_empty(client):
    response = client.get('/api/words')

    assert response.status_code == 200
    assert response.get_json() == {'words': []}


def test_create_word_requires_auth(client):
    response = client.post('/api/words', data=word_form(), content_type='multipart/form-data')

    assert response.status_code == 401
    assert response.get_json() == {'message': 'Unauthorized'}


def test_create_word_rejects_bad_token(client):
    response = client.post(
        '/api/words', data=word_form(), content_type='multipart/form-data',
        headers={'Authorization': 'Bearer not-a-token'}
    )
    assert response.status_code == 401


def test_create_word_stores_media(client, auth_headers, upload_dir, admin_user):
    response = create_word(client, auth_headers)

    assert response.status_code == 201
    word = response.get_json()
    assert word['mikmaq'] == "Ta'ta"
    assert word['startMonth'] == 'January'
    assert word['userId'] == admin_user.id
    assert word['imagePath'].endswith('.png')
    assert word['audioPath'].endswith('.mp3')
    assert os.path.exists(os.path.join(upload_dir, word['imagePath']))
    assert os.path.exists(os.path.join(upload_dir, word['audioPath']))

    listed = client.get('/api/words').get_json()['words']
    assert [w['id'] for w in listed] == [word['id']]


def test_uploaded_media_is_served(client, auth_headers):
    word = create_word(client, auth_headers).get_json()

    response = client.get(f"/public/{word['imagePath']}")
    assert response.status_code == 200
    assert response.data == b'png-bytes'


def test_create_word_requires_both_files(client, auth_headers):
    response = create_word(client, auth_headers, audio=None)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Missing required uploaded files'


def test_create_word_validates_month(client, auth_headers):
    response = create_word(client, auth_headers, startMonth='Smarch')

    assert response.status_code == 400
    assert 'startMonth' in response.get_json()['error']


def test_create_word_requires_text_fields(client, auth_headers):
    response = create_word(client, auth_headers, english='  ')

    assert response.status_code == 400
    assert 'english' in response.get_json()['error']


def test_update_word_changes_fields_and_replaces_image(client, auth_headers, upload_dir):
    word = create_word(client, auth_headers).get_json()
    old_image = word['imagePath']

    response = client.patch(
        f"/api/words/{word['id']}",
        data={'english': 'Father', 'image': (io.BytesIO(b'new-png'), 'new.png')},
        headers=auth_headers, content_type='multipart/form-data'
    )

    assert response.status_code == 200
    updated = response.get_json()['word']
    assert updated['english'] == 'Father'
    assert updated['mikmaq'] == "Ta'ta"
    assert updated['imagePath'] != old_image
    assert updated['audioPath'] == word['audioPath']
    assert not os.path.exists(os.path.join(upload_dir, old_image))
    assert os.path.exists(os.path.join(upload_dir, updated['imagePath']))


def test_update_missing_word_returns_404(client, auth_headers):
    response = client.patch(
        '/api/words/64b000000000000000000000', data={'english': 'x'},
        headers=auth_headers, content_type='multipart/form-data'
    )
    assert response.status_code == 404


def test_delete_word_removes_record_and_media(client, auth_headers, upload_dir):
    word = create_word(client, auth_headers).get_json()

    response = client.delete(f"/api/words/{word['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()['word']['id'] == word['id']
    assert client.get('/api/words').get_json() == {'words': []}
    assert os.listdir(upload_dir) == []


def test_delete_with_invalid_id_returns_404(client, auth_headers):
    response = client.delete('/api/words/not-an-object-id', headers=auth_headers)
    assert response.status_code == 404


def test_search_endpoint(client, auth_headers):
    create_word(client, auth_headers)
    create_word(
        client, auth_headers, mikmaq="Ni'n", english='I', startMonth='September',
        image=(io.BytesIO(b'a'), 'nin.png'), audio=(io.BytesIO(b'b'), 'nin.mp3')
    )

    found = client.get('/api/words/search?q=Dad').get_json()['words']
    everything = client.get('/api/words/search?q=').get_json()['words']

    assert [w['mikmaq'] for w in found] == ["Ta'ta"]
    assert [w['mikmaq'] for w in everything] == ["Ta'ta", "Ni'n"]


def test_failed_insert_removes_saved_media(client, auth_headers, collections, upload_dir, monkeypatch):
    def broken_insert(doc):
        raise RuntimeError('database went away')

    monkeypatch.setattr(collections.words, 'insert_one', broken_insert)

    response = create_word(client, auth_headers)

    assert response.status_code == 500
    assert os.listdir(upload_dir) == []


def write_media(media_dir, stem, image=True, audio=True):
    if image:
        (media_dir / 'images').mkdir(exist_ok=True)
        (media_dir / 'images' / f'{stem}.png').write_bytes(b'png')
    if audio:
        (media_dir / 'audio').mkdir(exist_ok=True)
        (media_dir / 'audio' / f'{stem}.mp3').write_bytes(b'mp3')


def test_import_words_replaces_catalog(client, auth_headers, upload_dir, tmp_path, admin_user):
    from klusuwaqn.services.word_service import get_word_service

    old = create_word(client, auth_headers).get_json()
    media_dir = tmp_path / 'media'
    media_dir.mkdir()
    write_media(media_dir, "ni'n")
    write_media(media_dir, 'aqq', audio=False)

    records = [
        {'mikmaq': "Ni'n", 'english': 'I', 'startMonth': 'September'},
        {'mikmaq': 'Aqq', 'english': 'And', 'startMonth': 'October'},
    ]
    imported = get_word_service().import_words(records, str(media_dir), admin_user.id)

    assert imported == 1
    listed = client.get('/api/words').get_json()['words']
    assert [w['mikmaq'] for w in listed] == ["Ni'n"]
    assert listed[0]['userId'] == admin_user.id
    assert old['imagePath'] not in os.listdir(upload_dir)
    assert old['audioPath'] not in os.listdir(upload_dir)
    assert sorted(os.listdir(upload_dir)) == sorted([listed[0]['imagePath'], listed[0]['audioPath']])


def test_seed_creates_admin_and_imports_available_words(collections, upload_dir, tmp_path):
    from seed import seed

    media_dir = tmp_path / 'media'
    media_dir.mkdir()
    write_media(media_dir, "ki'l")

    imported = seed(collections, str(media_dir), upload_dir, 'testing-secret-key')

    assert imported == 1
    assert [doc['mikmaq'] for doc in collections.words.documents] == ["Ki'l"]
    assert [doc['username'] for doc in collections.users.documents] == ['admin']
