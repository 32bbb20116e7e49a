from __future__ import annotations

from rental.domain.entities.car import Car

INITIAL_CARS: tuple[Car, ...] = (
    Car(
        id="c1",
        host_id="h1",
        make="Toyota",
        model="Avanza",
        year=2022,
        price_per_day_idr=450_000,
        location="Bali, Indonesia",
        description="Roomy seven-seater, ideal for family trips around the island.",
        image_url="https://images.unsplash.com/photo-1549317661-bd32c8ce0db2",
        is_sponsored=True,
        rating=4.8,
        trips=132,
        features=("7 Seats", "AC", "Bluetooth", "Manual"),
    ),
    Car(
        id="c2",
        host_id="h2",
        make="Honda",
        model="Brio",
        year=2021,
        price_per_day_idr=300_000,
        location="Jakarta, Indonesia",
        description="Compact hatchback that slips through city traffic.",
        image_url="https://images.unsplash.com/photo-1590362891991-f776e747a588",
        rating=4.6,
        trips=87,
        features=("Automatic", "AC", "Petrol"),
    ),
    Car(
        id="c3",
        host_id="h3",
        make="Tesla",
        model="Model 3",
        year=2023,
        price_per_day_idr=1_800_000,
        location="Singapore",
        description="All-electric sedan with autopilot and premium sound.",
        image_url="https://images.unsplash.com/photo-1560958089-b8a1929cea89",
        is_sponsored=True,
        rating=4.9,
        trips=54,
        features=("Electric", "Premium Audio", "Apple CarPlay"),
    ),
    Car(
        id="c4",
        host_id="h4",
        make="Proton",
        model="X70",
        year=2022,
        price_per_day_idr=650_000,
        location="Kuala Lumpur, Malaysia",
        description="Comfortable SUV for highway runs to the coast.",
        image_url="https://images.unsplash.com/photo-1606664515524-ed2f786a0bd6",
        rating=4.5,
        trips=41,
        features=("Automatic", "Climate Control", "Android Auto"),
    ),
    Car(
        id="c5",
        host_id="h5",
        make="Toyota",
        model="RAV4 Hybrid",
        year=2023,
        price_per_day_idr=1_200_000,
        location="Toronto, Canada",
        description="All-wheel-drive hybrid that handles every season.",
        image_url="https://images.unsplash.com/photo-1581540222194-0def2dda95b8",
        rating=4.7,
        trips=66,
        features=("Hybrid", "5 Seats", "Heated Seats"),
    ),
    Car(
        id="c6",
        host_id="h6",
        make="Ford",
        model="Mustang Convertible",
        year=2021,
        price_per_day_idr=2_100_000,
        location="Los Angeles, USA",
        description="Top-down cruising along the Pacific Coast Highway.",
        image_url="https://images.unsplash.com/photo-1584345604476-8ec5e12e42dd",
        rating=4.8,
        trips=210,
        features=("Convertible", "Premium Sound", "Petrol"),
    ),
    Car(
        id="c7",
        host_id="h1",
        make="Mitsubishi",
        model="Pajero Sport",
        year=2020,
        price_per_day_idr=900_000,
        location="Bali, Indonesia",
        description="Rugged diesel SUV for the mountain roads up to Kintamani.",
        image_url="https://images.unsplash.com/photo-1519641471654-76ce0107ad1b",
        rating=4.4,
        trips=29,
        features=("Diesel", "4WD", "7 Seats"),
    ),
)
