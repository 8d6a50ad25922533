import pytest
from bson import ObjectId

from rental.models.user import Role, new_user_document
from rental.repositories import user as user_repo


async def _register(client, email):
	resp = await client.post('/users', json={"email": email})
	return resp.json()['insertedId']


@pytest.mark.asyncio
@pytest.mark.integration
async def test_first_admin_needs_no_token(client, store):
	resp = await client.post('/users/admin', json={"email": "first@example.com"})
	assert resp.status_code == 200
	body = resp.json()
	assert body['message'] == 'Admin user created successfully'
	assert body['insertedId']
	doc = await store.users.find_one({"email": "first@example.com"})
	assert doc['role'] == 'admin'

@pytest.mark.asyncio
@pytest.mark.integration
async def test_bootstrap_promotes_existing_user(client, store):
	await _register(client, "early@example.com")
	resp = await client.post('/users/admin', json={"email": "early@example.com"})
	assert resp.status_code == 200
	assert resp.json()['message'] == 'User promoted to admin'
	assert resp.json()['modifiedCount'] == 1
	assert (await store.users.find_one({"email": "early@example.com"}))['role'] == 'admin'

@pytest.mark.asyncio
@pytest.mark.integration
async def test_bootstrap_closed_once_admin_exists(client, admin_email):
	resp = await client.post('/users/admin', json={"email": "second@example.com"})
	assert resp.status_code == 401
	assert resp.json() == {"message": "Authentication required"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_bootstrap_rejects_invalid_token(client, admin_email):
	resp = await client.post('/users/admin', json={"email": "second@example.com"},
		headers={"Authorization": "Bearer not.a.token"})
	assert resp.status_code == 401
	assert resp.json() == {"message": "Invalid token"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_bootstrap_rejects_non_admin_caller(client, admin_email, bearer):
	await _register(client, "joe@example.com")
	resp = await client.post('/users/admin', json={"email": "joe@example.com"}, headers=bearer("joe@example.com"))
	assert resp.status_code == 403
	assert resp.json() == {"message": "Admin privileges required"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_can_create_more_admins(client, store, admin_email, bearer):
	resp = await client.post('/users/admin', json={"email": "second@example.com"}, headers=bearer(admin_email))
	assert resp.status_code == 200
	assert await store.users.count_documents({"role": "admin"}) == 2

@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_requires_admin(client, admin_email, bearer):
	await _register(client, "joe@example.com")
	resp = await client.get('/users', headers=bearer("joe@example.com"))
	assert resp.status_code == 403
	assert resp.json() == {"message": "forbidden access"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_as_admin(client, admin_email, bearer):
	for e in ["a@example.com", "b@example.com"]:
		await _register(client, e)
	resp = await client.get('/users', headers=bearer(admin_email))
	assert resp.status_code == 200
	body = resp.json()
	assert [u['email'] for u in body] == [admin_email, "a@example.com", "b@example.com"]
	assert [u['role'] for u in body] == ["admin", "user", "user"]
	assert all(len(u['_id']) == 24 for u in body)

@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_status_of_other_email_requires_admin(client, admin_email, bearer):
	await _register(client, "joe@example.com")
	denied = await client.get(f'/users/admin/{admin_email}', headers=bearer("joe@example.com"))
	assert denied.status_code == 403
	allowed = await client.get('/users/admin/joe@example.com', headers=bearer(admin_email))
	assert allowed.status_code == 200
	assert allowed.json() == {"admin": False}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_status_of_unknown_self(client, bearer):
	resp = await client.get('/users/admin/ghost@example.com', headers=bearer("ghost@example.com"))
	assert resp.status_code == 200
	assert resp.json() == {"admin": False}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_promote_by_id(client, admin_email, bearer):
	user_id = await _register(client, "a@x.com")
	own = await client.get('/users/admin/a@x.com', headers=bearer("a@x.com"))
	assert own.json() == {"admin": False}

	denied = await client.patch(f'/users/admin/{user_id}', headers=bearer("a@x.com"))
	assert denied.status_code == 403

	resp = await client.patch(f'/users/admin/{user_id}', headers=bearer(admin_email))
	assert resp.status_code == 200
	assert resp.json()['matchedCount'] == 1
	assert resp.json()['modifiedCount'] == 1

	own = await client.get('/users/admin/a@x.com', headers=bearer("a@x.com"))
	assert own.json() == {"admin": True}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_promote_rejects_malformed_id(client, admin_email, bearer):
	resp = await client.patch('/users/admin/not-an-id', headers=bearer(admin_email))
	assert resp.status_code == 400
	assert resp.json() == {"message": "invalid id"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_user(client, store, admin_email, bearer):
	user_id = await _register(client, "del@example.com")
	resp = await client.delete(f'/users/{user_id}', headers=bearer(admin_email))
	assert resp.status_code == 200
	assert resp.json()['deletedCount'] == 1
	assert await store.users.find_one({"email": "del@example.com"}) is None
	again = await client.delete(f'/users/{user_id}', headers=bearer(admin_email))
	assert again.json()['deletedCount'] == 0

@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_user_requires_admin(client, store, bearer):
	await store.users.insert_one(new_user_document({"email": "joe@example.com"}, Role.USER))
	resp = await client.delete(f'/users/{ObjectId()}', headers=bearer("joe@example.com"))
	assert resp.status_code == 403
	unauthenticated = await client.delete(f'/users/{ObjectId()}')
	assert unauthenticated.status_code == 401

@pytest.mark.asyncio
@pytest.mark.integration
async def test_bootstrap_rejects_caller_without_record(client, admin_email, bearer):
	resp = await client.post('/users/admin', json={"email": "second@example.com"}, headers=bearer("stranger@example.com"))
	assert resp.status_code == 403
	assert resp.json() == {"message": "Admin privileges required"}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_bootstrap_promotes_user_registered_concurrently(client, store, monkeypatch):
	await store.users.insert_one(new_user_document({"email": "racer@example.com"}, Role.USER))

	async def not_found_yet(store, email):
		return None
	monkeypatch.setattr(user_repo, "get_by_email", not_found_yet)

	resp = await client.post('/users/admin', json={"email": "racer@example.com"})
	assert resp.status_code == 200
	assert resp.json()['message'] == 'User promoted to admin'
	assert await store.users.count_documents({"email": "racer@example.com"}) == 1
	assert (await store.users.find_one({"email": "racer@example.com"}))['role'] == 'admin'

@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_routes_without_token_are_401(client, admin_email):
	listed = await client.get('/users')
	assert listed.status_code == 401
	promoted = await client.patch(f'/users/admin/{ObjectId()}')
	assert promoted.status_code == 401

@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_users_passes_legacy_records_through(client, store, admin_email, bearer):
	await store.users.insert_one({"email": "legacy@example.com", "role": "moderator", "favourite": "soup"})
	resp = await client.get('/users', headers=bearer(admin_email))
	assert resp.status_code == 200
	legacy = [u for u in resp.json() if u['email'] == "legacy@example.com"]
	assert legacy[0]['role'] == "moderator"
	assert legacy[0]['favourite'] == "soup"

@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_status_with_mixed_case_email(client, bearer):
	await _register(client, "Ann@Example.COM")
	token = (await client.post('/jwt', json={"email": "Ann@Example.COM"})).json()['token']
	resp = await client.get('/users/admin/Ann@Example.COM', headers={"Authorization": f"Bearer {token}"})
	assert resp.status_code == 200
	assert resp.json() == {"admin": False}

@pytest.mark.asyncio
@pytest.mark.integration
async def test_mixed_case_admin_is_recognised(client, store, bearer):
	await client.post('/users/admin', json={"email": "Boss@Example.COM"})
	assert (await store.users.find_one({"role": "admin"}))['email'] == "Boss@example.com"
	resp = await client.get('/users', headers=bearer("Boss@Example.COM"))
	assert resp.status_code == 200
