"""Category management: command and handler."""

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.category import Category
from storefront.shared.errors import ConflictError


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(max_length=120)
    description: Text()


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, slug=command.slug, description=command.description)

        repo = current_domain.repository_for(Category)
        if repo.find_by_slug(category.slug) is not None:
            raise ConflictError("Category with this slug already exists")

        repo.add(category)
        return str(category.id)
