"""Launch the FastAPI server."""
from nlp_studio import config

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "nlp_studio.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        log_level=config.LOG_LEVEL.lower(),
        # Behind a proxy in production; needed for secure session cookies
        proxy_headers=config.IS_PROD,
        forwarded_allow_ips="*" if config.IS_PROD else None,
    )
