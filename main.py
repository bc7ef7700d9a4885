from edgelog import endpoint_factory



def main():
    # Example usage of the endpoint factory
    config = {"api_key": "EXAMPLEKEY", "base_url": "https://api.fastly.com"}

    bigquery = endpoint_factory("bigquery", config)

    for endpoint in bigquery.list("SU1Z0isxPaozGVKXdv0eY", 1):
        print(f"BigQuery endpoint: {endpoint.name} -> {endpoint.project_id}.{endpoint.dataset}.{endpoint.table}")

if __name__ == "__main__":
    main()
