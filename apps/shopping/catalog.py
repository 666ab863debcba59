"""
Built-in shopping data: default categories and list templates.

Templates reference categories by name; applying a template looks the
name up case-insensitively among stored categories.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class CatalogItem:
    name: str
    unit: str


@dataclass(frozen=True)
class CatalogCategory:
    name: str
    icon: str
    sort_order: int
    suggested_items: tuple = ()


@dataclass(frozen=True)
class TemplateItem:
    name: str
    quantity: Decimal
    unit: str
    category_name: str


@dataclass(frozen=True)
class ShoppingTemplate:
    id: str
    name: str
    description: str
    icon: str
    items: tuple = field(default_factory=tuple)


def _item(name, quantity, unit, category_name):
    return TemplateItem(name, Decimal(str(quantity)), unit, category_name)


DEFAULT_CATEGORIES = (
    CatalogCategory('Carnes', '🥩', 1, (
        CatalogItem('Arrachera', 'kg'),
        CatalogItem('Carne para asar', 'kg'),
        CatalogItem('Rib Eye', 'kg'),
        CatalogItem('Picanha', 'kg'),
        CatalogItem('Chorizo', 'g'),
        CatalogItem('Salchichas', 'paquetes'),
    )),
    CatalogCategory('Verduras', '🥬', 2, (
        CatalogItem('Cebolla', 'piezas'),
        CatalogItem('Cebollitas', 'manojos'),
        CatalogItem('Limón', 'piezas'),
        CatalogItem('Chile serrano', 'piezas'),
        CatalogItem('Tomate', 'piezas'),
        CatalogItem('Cilantro', 'manojos'),
        CatalogItem('Aguacate', 'piezas'),
        CatalogItem('Nopales', 'piezas'),
    )),
    CatalogCategory('Bebidas', '🍺', 3, (
        CatalogItem('Cerveza', 'six'),
        CatalogItem('Refrescos', 'litros'),
        CatalogItem('Agua', 'paquetes'),
        CatalogItem('Hielo', 'bolsas'),
    )),
    CatalogCategory('Otros', '🛒', 4, (
        CatalogItem('Tortillas de maíz', 'kg'),
        CatalogItem('Tortillas de harina', 'paquetes'),
        CatalogItem('Salsa verde', 'piezas'),
        CatalogItem('Carbón', 'kg'),
        CatalogItem('Servilletas', 'paquetes'),
        CatalogItem('Platos desechables', 'paquetes'),
    )),
)


SHOPPING_TEMPLATES = (
    ShoppingTemplate(
        id='carnita-basica',
        name='Carnita Asada Básica',
        description='Lo esencial para una carnita asada tradicional',
        icon='🥩',
        items=(
            _item('Arrachera', 2, 'kg', 'Carnes'),
            _item('Carne para asar', 1.5, 'kg', 'Carnes'),
            _item('Chorizo', 500, 'g', 'Carnes'),
            _item('Salchichas', 1, 'paquetes', 'Carnes'),
            _item('Cebolla', 3, 'piezas', 'Verduras'),
            _item('Limón', 10, 'piezas', 'Verduras'),
            _item('Chile serrano', 10, 'piezas', 'Verduras'),
            _item('Tomate', 5, 'piezas', 'Verduras'),
            _item('Cilantro', 1, 'manojos', 'Verduras'),
            _item('Aguacate', 4, 'piezas', 'Verduras'),
            _item('Tortillas de maíz', 2, 'kg', 'Otros'),
            _item('Tortillas de harina', 1, 'paquetes', 'Otros'),
            _item('Salsa verde', 1, 'piezas', 'Otros'),
            _item('Salsa roja', 1, 'piezas', 'Otros'),
            _item('Sal', 1, 'piezas', 'Otros'),
            _item('Pimienta', 1, 'piezas', 'Otros'),
            _item('Cerveza', 2, 'six', 'Bebidas'),
            _item('Refrescos', 2, 'litros', 'Bebidas'),
            _item('Agua', 1, 'paquetes', 'Bebidas'),
        ),
    ),
    ShoppingTemplate(
        id='carnita-premium',
        name='Carnita Premium',
        description='Para una carnita asada con todo incluido',
        icon='🔥',
        items=(
            _item('Ribeye', 2, 'kg', 'Carnes'),
            _item('Arrachera premium', 2, 'kg', 'Carnes'),
            _item('Costilla de res', 1.5, 'kg', 'Carnes'),
            _item('Chorizo artesanal', 500, 'g', 'Carnes'),
            _item('Camarón', 1, 'kg', 'Carnes'),
            _item('Cebolla cambray', 2, 'manojos', 'Verduras'),
            _item('Cebolla blanca', 3, 'piezas', 'Verduras'),
            _item('Limón', 15, 'piezas', 'Verduras'),
            _item('Chile serrano', 15, 'piezas', 'Verduras'),
            _item('Tomate', 6, 'piezas', 'Verduras'),
            _item('Cilantro', 2, 'manojos', 'Verduras'),
            _item('Aguacate', 6, 'piezas', 'Verduras'),
            _item('Nopales', 6, 'piezas', 'Verduras'),
            _item('Papa', 1, 'kg', 'Verduras'),
            _item('Tortillas de maíz', 3, 'kg', 'Otros'),
            _item('Tortillas de harina', 2, 'paquetes', 'Otros'),
            _item('Guacamole', 1, 'piezas', 'Otros'),
            _item('Salsa verde', 2, 'piezas', 'Otros'),
            _item('Salsa molcajeteada', 1, 'piezas', 'Otros'),
            _item('Chimichurri', 1, 'piezas', 'Otros'),
            _item('Cerveza artesanal', 3, 'six', 'Bebidas'),
            _item('Cerveza clara', 2, 'six', 'Bebidas'),
            _item('Refrescos', 3, 'litros', 'Bebidas'),
            _item('Agua mineral', 2, 'litros', 'Bebidas'),
            _item('Hielo', 2, 'bolsas', 'Bebidas'),
        ),
    ),
    ShoppingTemplate(
        id='carnita-express',
        name='Carnita Express',
        description='Lista rápida solo lo básico',
        icon='⚡',
        items=(
            _item('Carne para asar', 2, 'kg', 'Carnes'),
            _item('Chorizo', 500, 'g', 'Carnes'),
            _item('Cebolla', 2, 'piezas', 'Verduras'),
            _item('Limón', 6, 'piezas', 'Verduras'),
            _item('Tortillas', 1, 'kg', 'Otros'),
            _item('Salsa', 1, 'piezas', 'Otros'),
            _item('Cerveza', 1, 'six', 'Bebidas'),
        ),
    ),
)

TEMPLATES_BY_ID = {template.id: template for template in SHOPPING_TEMPLATES}
