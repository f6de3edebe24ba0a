#!/usr/bin/env python3
"""
Post-Deployment Health Check Script

This script validates that the deployed comment endpoint is routed and answering.
It never submits a valid comment, so no file is committed to the blog repository.

Usage:
    python scripts/health_check.py --url <DEPLOYMENT_URL> --environment <staging|production>

Checks Performed:
    1. POST <base-path>/post with an empty slug returns the slug validation error
    2. OPTIONS <base-path>/post (CORS preflight) returns an Access-Control-Allow-Origin header

Exit Codes:
    0: All health checks passed
    1: One or more health checks failed
"""

import argparse
import sys
import time
import requests
from typing import Dict, Tuple

EXPECTED_PROBE_RESULT = {"statusCode": 422, "msg": "Error: slug cannot be empty."}

# A submission that must be rejected before anything is sent to GitHub
PROBE_SUBMISSION = {
    "slug": "",
    "name": "health-check",
    "email": "health-check@example.com",
    "replyTo": "",
    "comment": "health check",
}


def check_validation_probe(url: str, base_path: str, timeout: int = 10) -> Tuple[bool, str]:
    """
    Posts a submission with an empty slug and expects the validation error.

    Args:
        url: Base deployment URL
        base_path: Route prefix of the comment endpoint
        timeout: Request timeout in seconds

    Returns:
        Tuple[bool, str]: (success, message)
    """
    endpoint = f"{base_path.rstrip('/')}/post"
    full_url = f"{url.rstrip('/')}{endpoint}"

    try:
        response = requests.post(full_url, data=PROBE_SUBMISSION, timeout=timeout)

        if response.status_code not in (200, 422):
            return False, f"✗ {endpoint} returned {response.status_code}"

        try:
            data = response.json()
        except ValueError:
            return False, f"✗ {endpoint} returned invalid JSON"

        if data == EXPECTED_PROBE_RESULT:
            return True, f"✓ {endpoint} rejected the empty slug"
        return False, f"✗ {endpoint} returned unexpected body: {data}"

    except requests.exceptions.Timeout:
        return False, f"✗ {endpoint} timed out after {timeout} seconds"
    except requests.exceptions.ConnectionError:
        return False, f"✗ {endpoint} connection failed"
    except requests.exceptions.RequestException as e:
        return False, f"✗ {endpoint} error: {str(e)}"


def check_cors_preflight(url: str, base_path: str, origin: str, timeout: int = 10) -> Tuple[bool, str]:
    """
    Sends a CORS preflight for the comment endpoint.

    Returns:
        Tuple[bool, str]: (success, message)
    """
    endpoint = f"{base_path.rstrip('/')}/post"
    full_url = f"{url.rstrip('/')}{endpoint}"
    headers = {
        "Origin": origin,
        "Access-Control-Request-Method": "POST",
    }

    try:
        response = requests.options(full_url, headers=headers, timeout=timeout)
        allowed = response.headers.get("Access-Control-Allow-Origin")

        if allowed:
            return True, f"✓ {endpoint} preflight allows {allowed}"
        return False, f"✗ {endpoint} preflight returned no Access-Control-Allow-Origin ({response.status_code})"

    except requests.exceptions.Timeout:
        return False, f"✗ {endpoint} preflight timed out after {timeout} seconds"
    except requests.exceptions.ConnectionError:
        return False, f"✗ {endpoint} preflight connection failed"
    except requests.exceptions.RequestException as e:
        return False, f"✗ {endpoint} preflight error: {str(e)}"


def run_health_checks(url: str, environment: str, base_path: str, origin: str) -> Dict[str, Tuple[bool, str]]:
    """
    Runs all health checks and returns results keyed by check name.
    """
    print(f"\n{'='*60}")
    print(f"Post-Deployment Health Checks - {environment.upper()}")
    print(f"{'='*60}\n")
    print(f"Target URL: {url}\n")

    results = {}

    print("Check 1: Validation probe (empty slug)...")
    success, message = check_validation_probe(url, base_path, timeout=15)
    results["validation_probe"] = (success, message)
    print(f"  {message}\n")

    print("Check 2: CORS preflight...")
    success, message = check_cors_preflight(url, base_path, origin, timeout=15)
    results["cors_preflight"] = (success, message)
    print(f"  {message}\n")

    return results


def print_summary(results: Dict[str, Tuple[bool, str]], environment: str) -> bool:
    """
    Prints a summary of health check results.

    Returns:
        bool: True if all checks passed, False otherwise
    """
    print(f"{'='*60}")
    print(f"Health Check Summary - {environment.upper()}")
    print(f"{'='*60}\n")

    passed = sum(1 for success, _ in results.values() if success)
    total = len(results)

    for check_name, (success, _) in results.items():
        status = "PASS" if success else "FAIL"
        symbol = "✓" if success else "✗"
        print(f"{symbol} {check_name}: {status}")

    print(f"\nTotal: {passed}/{total} checks passed\n")

    if passed == total:
        print("✓ All health checks passed. Deployment is healthy.\n")
        return True
    else:
        print(f"✗ {total - passed} health check(s) failed. Investigate issues above.\n")
        return False


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run post-deployment health checks")
    parser.add_argument(
        "--url",
        required=True,
        help="Deployment URL to check"
    )
    parser.add_argument(
        "--environment",
        required=True,
        choices=["staging", "production"],
        help="Deployment environment"
    )
    parser.add_argument(
        "--base-path",
        default="/api/comment",
        help="Route prefix of the comment endpoint (default: /api/comment)"
    )
    parser.add_argument(
        "--origin",
        default="https://example.com",
        help="Origin header sent with the CORS preflight"
    )
    parser.add_argument(
        "--retry",
        type=int,
        default=3,
        help="Number of retry attempts if checks fail (default: 3)"
    )
    parser.add_argument(
        "--retry-delay",
        type=int,
        default=10,
        help="Delay in seconds between retries (default: 10)"
    )

    args = parser.parse_args(argv)

    attempt = 1
    max_attempts = args.retry

    while attempt <= max_attempts:
        if attempt > 1:
            print(f"\n{'='*60}")
            print(f"Retry attempt {attempt}/{max_attempts}")
            print(f"{'='*60}")
            time.sleep(args.retry_delay)

        results = run_health_checks(args.url, args.environment, args.base_path, args.origin)

        all_passed = print_summary(results, args.environment)

        if all_passed:
            sys.exit(0)

        attempt += 1

    # All retries exhausted
    print(f"{'='*60}", file=sys.stderr)
    print(f"✗ HEALTH CHECKS FAILED AFTER {max_attempts} ATTEMPTS", file=sys.stderr)
    print(f"{'='*60}\n", file=sys.stderr)
    print("Deployment completed but the comment endpoint may not be healthy.", file=sys.stderr)
    print("Investigate the failed checks above.\n", file=sys.stderr)

    sys.exit(1)


if __name__ == "__main__":
    main()
