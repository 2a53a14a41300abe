"""Entry point for the Snippet Registry HTTP service."""

if __name__ == "__main__":
    import uvicorn
    from snippet_registry.core.config import settings

    print(f"Starting {settings.api_title} v{settings.api_version}")
    print(f"Missing binding policy: {settings.missing_binding_policy}")
    print(f"Extra catalog: {settings.catalog_path or 'none'}")
    print(f"Log level: {settings.log_level}")

    uvicorn.run(
        "snippet_registry.main:app",  # Use string import for hot reload
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
