from rental.domain.entities.car import Car


def build_highlights_prompt(car: Car) -> str:
    features = ", ".join(car.features) or "none listed"
    return (
        "You write copy for a car rental app.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "Output schema:\n"
        "  {\"highlights\": [\"...\", \"...\", \"...\"]}\n"
        "Rules:\n"
        "  - Exactly 3 short, punchy highlights, max 5 words each.\n"
        "  - Explain why this car is a great choice.\n"
        "\n"
        f"Car: {car.year} {car.make} {car.model}\n"
        f"Features: {features}\n"
        f"Location: {car.location}\n"
        f"Price: {car.price_per_day_idr} IDR per day\n"
    )


def build_description_prompt(make: str, model: str, year: int, location: str) -> str:
    return (
        "Write a short, attractive, and professional listing description for a car rental application.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "Output schema:\n"
        "  {\"description\": \"...\"}\n"
        "Rules:\n"
        "  - Max 2 sentences.\n"
        "  - Tone: welcoming, trustworthy, and exciting.\n"
        "  - Target audience: tourists and local travelers.\n"
        "  - No placeholders.\n"
        "\n"
        f"Car: {year} {make} {model}\n"
        f"Location: {location}\n"
    )


def build_nearby_prompt(location: str) -> str:
    return (
        "You suggest road-trip destinations for renters.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "Output schema:\n"
        "  {\"places\": [{\"name\": \"...\", \"description\": \"...\", \"url\": \"...\"}]}\n"
        "Rules:\n"
        "  - Exactly 3 specific, popular driving destinations or attractions.\n"
        "  - description is one sentence.\n"
        "  - url is an official or map link, or an empty string if unsure.\n"
        "\n"
        f"Near: {location}\n"
    )


def build_search_prompt(query: str) -> str:
    return (
        "Extract the location and date intent from this car rental search query.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "Output schema:\n"
        "  {\"location\": \"...\", \"date\": \"...\"}\n"
        "Rules:\n"
        "  - location is the city or place mentioned.\n"
        "  - date is the date mentioned as YYYY-MM-DD, or an empty string if none.\n"
        "\n"
        f"Query: {query}\n"
    )
