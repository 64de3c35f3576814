import numpy as np
import pytest
import requests
from faker import Faker

from pawgraph.config.settings import SeedConfig
from pawgraph.seed.fixture_provider import FixtureSeedProvider
from pawgraph.seed.photos import DogPhotoSource
from pawgraph.seed.provider import SeedError
from pawgraph.seed.random_provider import RandomSeedProvider
from pawgraph.seed.seeder import StoreSeeder
from pawgraph.store.entity_schema import Breed
from pawgraph.store.entity_store import EntityStore

from backend.app.loaders.seed_loader import load_store_from_seed

from conftest import StubResponse, StubSession

PHOTO_URL = "https://dog.example/api/random"


def _photo_session(count: int) -> StubSession:
    return StubSession(
        responses=[
            StubResponse({"message": f"https://images.example/dog{i}.jpg", "status": "success"})
            for i in range(count)
        ]
    )


def test_scenario_seed_links_owners(store):
    p1, p2 = store.list_people()

    assert store.person_count() == 2
    assert store.dog_count() == 3
    assert store.sealed
    assert [len(store.dogs_of(p.id)) for p in (p1, p2)] == [2, 1]
    assert all(d.likes == 0 for d in store.list_dogs())
    assert store.check_integrity() == []


def test_fixture_provider_cycles_fixtures(provider):
    store = EntityStore()
    StoreSeeder(store, provider).seed(people_count=3, dog_count=7)

    people = store.list_people()
    dogs = store.list_dogs()

    assert len(people) == 3
    assert len(dogs) == 7
    assert len({p.id for p in people}) == 3
    assert len({d.id for d in dogs}) == 7
    assert [d.name for d in dogs[3:6]] == [d.name for d in dogs[:3]]
    assert store.check_integrity() == []


def test_seeder_requires_an_owner_for_dogs(provider):
    with pytest.raises(SeedError):
        StoreSeeder(EntityStore(), provider).seed(people_count=0, dog_count=1)


def test_fixture_provider_rejects_empty_fixtures():
    with pytest.raises(ValueError):
        FixtureSeedProvider(people=[], dogs=[])


def test_random_provider_seeds_from_photo_api():
    session = _photo_session(20)
    provider = RandomSeedProvider(
        photos=DogPhotoSource(api_url=PHOTO_URL, timeout_s=3.0, session=session),
        faker=Faker(),
        rng=np.random.default_rng(7),
    )
    store = EntityStore()

    StoreSeeder(store, provider).seed(people_count=2, dog_count=20)

    dogs = store.list_dogs()
    assert len(dogs) == 20
    assert [d.photo for d in dogs] == [f"https://images.example/dog{i}.jpg" for i in range(20)]
    assert {d.breed for d in dogs} <= {Breed.LABRADOR, Breed.POODLE}
    assert all(" " in d.name for d in dogs)
    assert all(p.first_name and p.last_name for p in store.list_people())
    assert sum(len(store.dogs_of(p.id)) for p in store.list_people()) == 20
    assert store.check_integrity() == []

    assert len(session.calls) == 20
    assert session.calls[0] == (PHOTO_URL, {"timeout": 3.0})


def test_random_provider_is_reproducible_with_seed():
    def _draw(seed):
        provider = RandomSeedProvider(
            photos=DogPhotoSource(api_url=PHOTO_URL, session=_photo_session(0)),
            rng=np.random.default_rng(seed),
        )
        return [provider.dog_breed(i) for i in range(10)]

    assert _draw(42) == _draw(42)


def test_random_provider_from_config():
    provider = RandomSeedProvider.from_config(
        SeedConfig(photo_api_url=PHOTO_URL, photo_timeout_s=2.5, random_seed=3)
    )

    assert provider.photos.api_url == PHOTO_URL
    assert provider.photos.timeout_s == 2.5
    assert provider.photos.fallback_photo is None


def test_photo_source_uses_fallback_on_failure():
    source = DogPhotoSource(
        api_url=PHOTO_URL,
        fallback_photo="https://images.example/fallback.jpg",
        session=StubSession(error=requests.exceptions.ConnectionError("down")),
    )

    assert source.fetch() == "https://images.example/fallback.jpg"


@pytest.mark.parametrize(
    "session",
    [
        StubSession(error=requests.exceptions.Timeout("slow")),
        StubSession(responses=[StubResponse({}, status_code=503)]),
        StubSession(responses=[StubResponse({"status": "error"})]),
        StubSession(responses=[StubResponse(["https://images.example/dog.jpg"])]),
    ],
)
def test_photo_source_raises_without_fallback(session):
    source = DogPhotoSource(api_url=PHOTO_URL, session=session)

    with pytest.raises(SeedError):
        source.fetch()


def test_seed_loader_records_failure():
    provider = RandomSeedProvider(
        photos=DogPhotoSource(
            api_url=PHOTO_URL,
            session=StubSession(error=requests.exceptions.ConnectionError("down")),
        ),
        rng=np.random.default_rng(0),
    )
    store = EntityStore()

    load_store_from_seed(
        store=store,
        provider=provider,
        config=SeedConfig(people_count=2, dog_count=5),
    )

    assert "seed_error" in store.metadata
    assert store.metadata["seed_provider"] == "RandomSeedProvider"
    assert store.sealed
    assert store.person_count() == 0
    assert store.dog_count() == 0


def test_seed_loader_marks_success(provider):
    store = EntityStore()

    load_store_from_seed(
        store=store,
        provider=provider,
        config=SeedConfig(people_count=2, dog_count=3),
    )

    assert store.metadata["seeded"] is True
    assert store.metadata["seed_provider"] == "FixtureSeedProvider"
    assert store.dog_count() == 3


def test_seed_loader_discards_partial_seed():
    session = _photo_session(3)
    session.error = requests.exceptions.ConnectionError("dropped")
    provider = RandomSeedProvider(
        photos=DogPhotoSource(api_url=PHOTO_URL, session=session),
        rng=np.random.default_rng(0),
    )
    store = EntityStore()

    load_store_from_seed(
        store=store,
        provider=provider,
        config=SeedConfig(people_count=2, dog_count=5),
    )

    assert len(session.calls) == 4
    assert store.metadata["seed_error"]
    assert store.sealed
    assert store.person_count() == 0
    assert store.dog_count() == 0
    assert store.list_people() == []


def test_seed_loader_records_non_object_payload():
    provider = RandomSeedProvider(
        photos=DogPhotoSource(
            api_url=PHOTO_URL,
            session=StubSession(responses=[StubResponse(["x"])]),
        ),
        rng=np.random.default_rng(0),
    )
    store = EntityStore()

    load_store_from_seed(
        store=store,
        provider=provider,
        config=SeedConfig(people_count=1, dog_count=1),
    )

    assert "seed_error" in store.metadata
    assert store.dog_count() == 0
