# supplyhub/utils/retry.py
from redis import exceptions as redis_errors
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

# only transport failures get another attempt, a rejected command fails the same way twice
TRANSIENT_REDIS_ERRORS = (redis_errors.ConnectionError, redis_errors.TimeoutError)


def redis_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(TRANSIENT_REDIS_ERRORS),
    )
