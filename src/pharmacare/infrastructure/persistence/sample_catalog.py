"""Sample parapharmacy products written to a fresh catalog file."""

_IMAGE = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=300"

SAMPLE_PRODUCTS: list[dict] = [
    {
        "id": "1",
        "name": "Panadol Extra",
        "description": "Antidouleur et anti-fièvre efficace, 500mg + 65mg caféine",
        "price": "45.00",
        "category": "medicaments",
        "image": _IMAGE.format("1584308666744-24d5c474f2ae"),
        "in_stock": 1,
        "rating": "4.8",
        "review_count": 24,
    },
    {
        "id": "2",
        "name": "Crème Anti-Âge Vichy",
        "description": "Soin anti-âge hydratant, réduction des rides visibles",
        "price": "320.00",
        "category": "cosmetiques",
        "image": _IMAGE.format("1596462502278-27bfdc403348"),
        "in_stock": 1,
        "rating": "4.5",
        "review_count": 18,
    },
    {
        "id": "3",
        "name": "Vitamines Multi Bio",
        "description": "Complexe vitaminique bio, 100% naturel et certifié",
        "price": "180.00",
        "category": "bio",
        "image": _IMAGE.format("1556909114-f6e7ad7d3136"),
        "in_stock": 1,
        "rating": "5.0",
        "review_count": 32,
    },
    {
        "id": "4",
        "name": "Thermomètre Digital",
        "description": "Thermomètre digital précis, mesure rapide en 30 secondes",
        "price": "85.00",
        "category": "medicaments",
        "image": _IMAGE.format("1559757148-5c350d0d3c56"),
        "in_stock": 1,
        "rating": "4.2",
        "review_count": 12,
    },
    {
        "id": "5",
        "name": "Crème Solaire SPF 50+",
        "description": "Protection solaire très haute, résistante à l'eau",
        "price": "125.00",
        "category": "cosmetiques",
        "image": _IMAGE.format("1556228453-efd6c1ff04f6"),
        "in_stock": 1,
        "rating": "4.9",
        "review_count": 41,
    },
    {
        "id": "6",
        "name": "Tisanes Détox Bio",
        "description": "Mélange de plantes bio pour détox naturelle",
        "price": "65.00",
        "category": "bio",
        "image": _IMAGE.format("1544787219-7f47ccb76574"),
        "in_stock": 1,
        "rating": "4.3",
        "review_count": 28,
    },
]
