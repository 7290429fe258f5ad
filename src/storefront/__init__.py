"""Storefront: users, catalogue, carts, wishlists and orders behind a JSON API."""
