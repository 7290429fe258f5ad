import os
from decimal import Decimal
from pathlib import Path

import pytest

DEFAULT_PASSWORD = "password123"


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Fetch and activate the domain by pushing the associated domain_context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    # Import the API package before init() traverses its modules by file path
    import storefront.api  # noqa: F401
    from storefront.domain import storefront

    storefront.init()
    storefront.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront)

    yield

    drop_db(storefront)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from storefront.domain import revocations

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    revocations.clear()


@pytest.fixture(scope="session")
def password_hash():
    """bcrypt is slow on purpose; hash the shared test password once."""
    from storefront.auth.passwords import hash_password

    return hash_password(DEFAULT_PASSWORD)


@pytest.fixture()
def make_user(password_hash):
    from protean import current_domain

    from storefront.user.user import Role, User

    counter = iter(range(1, 1000))

    def _make_user(email=None, role=Role.CUSTOMER, firstname="John", lastname="Doe", with_address=False):
        user = User.register(
            firstname=firstname,
            lastname=lastname,
            email=email or f"user{next(counter)}@example.com",
            password_hash=password_hash,
            role=role,
        )
        if with_address:
            user.add_address(
                firstname=firstname,
                lastname=lastname,
                street="123 Main St",
                city="Springfield",
                state="IL",
                zipcode="62701",
                country="US",
                phone="+15551234567",
            )
        current_domain.repository_for(User).add(user)
        return current_domain.repository_for(User).get(user.id)

    return _make_user


@pytest.fixture()
def customer(make_user):
    return make_user(email="customer@example.com", with_address=True)


@pytest.fixture()
def admin(make_user):
    from storefront.user.user import Role

    return make_user(email="admin@example.com", role=Role.ADMIN, firstname="Ada", lastname="Admin")


@pytest.fixture()
def category():
    from protean import current_domain

    from storefront.product.category import Category

    category = Category.create(name="Apparel")
    current_domain.repository_for(Category).add(category)
    return category


@pytest.fixture()
def make_product(category):
    from protean import current_domain

    from storefront.product.product import Product

    counter = iter(range(1, 1000))

    def _make_product(name=None, price="10.00", stock=10, **overrides):
        number = next(counter)
        fields = {
            "name": name or f"Product {number}",
            "slug": f"product-{number}",
            "price": Decimal(price),
            "stock": stock,
            "category_id": category.id,
        }
        fields.update(overrides)
        product = Product.create(**fields)
        current_domain.repository_for(Product).add(product)
        return current_domain.repository_for(Product).get(product.id)

    return _make_product


@pytest.fixture()
def identity_for():
    """Build the Identity an authenticated request for ``user`` would carry."""
    from storefront.auth.identity import Identity
    from storefront.auth.tokens import create_access_token
    from storefront.domain import settings

    def _identity_for(user):
        access = create_access_token(str(user.id), settings.auth)
        return Identity(
            user_id=str(user.id),
            email=user.email,
            role=user.role,
            token=access.token,
            expires_at=access.expires_at,
        )

    return _identity_for


@pytest.fixture()
def auth_headers():
    from storefront.auth.tokens import create_access_token
    from storefront.domain import settings

    def _auth_headers(user):
        token = create_access_token(str(user.id), settings.auth).token
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture()
def client():
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from storefront.api import register_exception_handlers, routers
    from storefront.domain import storefront

    app = FastAPI()
    register_exception_handlers(app)
    for router in routers:
        app.include_router(router)

    # Requests are served on the client's portal thread, which needs its own context
    @app.middleware("http")
    async def domain_context_middleware(request, call_next):
        with storefront.domain_context():
            return await call_next(request)

    return TestClient(app)
