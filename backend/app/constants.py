DEFAULTS = {
    # Service name shown in OpenAPI docs
    "APP_NAME": "pawgraph-backend",
    # Prefix for the REST diagnostics routes
    "API_PREFIX": "",
    # Mount point of the GraphQL endpoint
    "GRAPHQL_PATH": "/graphql",
    # Serve GraphiQL on GET requests to the GraphQL endpoint
    "GRAPHIQL_ENABLED": True,
    # Artificial delay applied to every HTTP request (milliseconds)
    "LATENCY_MS": 500,
    # Bind address for run_pawgraph.py
    "HOST": "0.0.0.0",
    # Bind port for run_pawgraph.py
    "PORT": 4000,
    # Root log level
    "LOG_LEVEL": "INFO",
    # Number of people generated at startup
    "SEED_PEOPLE_COUNT": 2,
    # Number of dogs generated at startup
    "SEED_DOG_COUNT": 20,
    # Random dog photo API
    "SEED_PHOTO_API_URL": "https://dog.ceo/api/breeds/image/random",
    # Photo API request timeout (seconds)
    "SEED_PHOTO_TIMEOUT_S": 10.0,
    # Photo used when the photo API is unreachable (None = fail seeding)
    "SEED_FALLBACK_PHOTO": None,
    # Seed for names, breeds and owner assignment (None = nondeterministic)
    "SEED_RANDOM_SEED": None,
}
