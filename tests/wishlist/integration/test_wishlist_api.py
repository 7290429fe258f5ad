"""Integration tests for the /wishlist endpoints."""


class TestWishlistEndpoints:
    def test_requires_authentication(self, client):
        assert client.get("/wishlist").status_code == 401

    def test_add_and_list(self, client, customer, make_product, auth_headers):
        product = make_product(
            name="Scarf",
            price="15.00",
            images=[{"url": "https://cdn.example.com/scarf.jpg"}],
        )
        headers = auth_headers(customer)

        response = client.post("/wishlist", json={"productId": str(product.id)}, headers=headers)
        assert response.status_code == 201

        response = client.get("/wishlist", headers=headers)
        assert response.status_code == 200
        page = response.json()["responseObject"]
        assert page["total"] == 1
        entry = page["data"][0]
        assert entry["productId"] == str(product.id)
        assert entry["product"]["price"] == "15.00"
        assert entry["product"]["image"] == "https://cdn.example.com/scarf.jpg"
        assert entry["product"]["isActive"] is True

    def test_duplicate(self, client, customer, make_product, auth_headers):
        product = make_product()
        headers = auth_headers(customer)
        client.post("/wishlist", json={"productId": str(product.id)}, headers=headers)

        response = client.post("/wishlist", json={"productId": str(product.id)}, headers=headers)

        assert response.status_code == 409

    def test_inactive_product(self, client, customer, make_product, auth_headers):
        product = make_product(is_active=False)
        response = client.post("/wishlist", json={"productId": str(product.id)}, headers=auth_headers(customer))
        assert response.status_code == 410

    def test_remove_and_clear(self, client, customer, make_product, auth_headers):
        first, second = make_product(), make_product()
        headers = auth_headers(customer)
        client.post("/wishlist", json={"productId": str(first.id)}, headers=headers)
        client.post("/wishlist", json={"productId": str(second.id)}, headers=headers)

        response = client.delete(f"/wishlist/{first.id}", headers=headers)
        assert response.status_code == 200

        response = client.delete(f"/wishlist/{first.id}", headers=headers)
        assert response.status_code == 404

        response = client.delete("/wishlist", headers=headers)
        assert response.json()["message"] == "Wishlist cleared"
        assert client.get("/wishlist", headers=headers).json()["responseObject"]["total"] == 0
