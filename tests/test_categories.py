"""API tests for /categories."""


class TestCreateCategory:
    def test_create_and_fetch(self, client):
        resp = client.post("/categories", json={"name": "Hardware"})
        assert resp.status_code == 201
        created = resp.json()
        assert created["name"] == "Hardware"

        fetched = client.get(f"/categories/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Hardware"

    def test_name_is_trimmed(self, client):
        resp = client.post("/categories", json={"name": "  Tools  "})
        assert resp.status_code == 201
        assert resp.json()["name"] == "Tools"

    def test_duplicate_name_conflicts(self, client, make_category):
        make_category("Hardware")
        resp = client.post("/categories", json={"name": "Hardware"})
        assert resp.status_code == 409
        assert resp.json()["message"] == "Category name already exists"

    def test_missing_name_rejected(self, client):
        resp = client.post("/categories", json={})
        assert resp.status_code == 400
        assert "name" in resp.json()["message"]

    def test_blank_name_rejected(self, client):
        resp = client.post("/categories", json={"name": "   "})
        assert resp.status_code == 400
        assert "Category name is required" in resp.json()["message"]

    def test_unknown_field_rejected(self, client):
        resp = client.post("/categories", json={"name": "Hardware", "color": "red"})
        assert resp.status_code == 400

    def test_name_longer_than_column_rejected(self, client):
        resp = client.post("/categories", json={"name": "x" * 101})
        assert resp.status_code == 400
        assert client.get("/categories").json() == []

    def test_name_at_column_limit_accepted(self, client):
        assert client.post("/categories", json={"name": "x" * 100}).status_code == 201

    def test_non_string_name_rejected(self, client):
        resp = client.post("/categories", json={"name": 42})
        assert resp.status_code == 400


class TestReadCategories:
    def test_list_is_alphabetical(self, client, make_category):
        for name in ("Toys", "Books", "Garden"):
            make_category(name)
        names = [c["name"] for c in client.get("/categories").json()]
        assert names == ["Books", "Garden", "Toys"]

    def test_unknown_id_is_404(self, client):
        resp = client.get("/categories/999")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Category not found"}

    def test_non_integer_id_is_400(self, client):
        assert client.get("/categories/abc").status_code == 400


class TestUpdateCategory:
    def test_rename(self, client, make_category):
        cat = make_category("Hardwre")
        resp = client.put(f"/categories/{cat['id']}", json={"name": "Hardware"})
        assert resp.status_code == 200
        assert resp.json() == {**cat, "name": "Hardware"}

    def test_rename_to_existing_name_conflicts(self, client, make_category):
        make_category("Books")
        cat = make_category("Toys")
        resp = client.put(f"/categories/{cat['id']}", json={"name": "Books"})
        assert resp.status_code == 409
        assert client.get(f"/categories/{cat['id']}").json()["name"] == "Toys"

    def test_unknown_id_is_404(self, client):
        assert client.put("/categories/999", json={"name": "X"}).status_code == 404

    def test_blank_name_checked_before_lookup(self, client):
        assert client.put("/categories/999", json={"name": ""}).status_code == 400


class TestDeleteCategory:
    def test_returns_deleted_record(self, client, make_category):
        cat = make_category("Toys")
        resp = client.delete(f"/categories/{cat['id']}")
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Category deleted successfully"
        assert body["category"]["id"] == cat["id"]
        assert client.get(f"/categories/{cat['id']}").status_code == 404

    def test_products_become_uncategorized(self, client, make_category, make_product):
        cat = make_category("Toys")
        product = make_product(category_id=cat["id"])
        assert product["category_name"] == "Toys"

        client.delete(f"/categories/{cat['id']}")

        after = client.get(f"/products/{product['id']}").json()
        assert after["category_id"] is None
        assert after["category_name"] is None

    def test_unknown_id_is_404(self, client):
        assert client.delete("/categories/999").status_code == 404
