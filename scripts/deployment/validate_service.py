#!/usr/bin/env python3
"""
Validation script for the link shortener service.
Exercises a live running service to check the HTTP contract end to end.
"""

import sys
import time
import requests
from typing import Optional
from datetime import datetime


class ServiceValidator:
    """Validates link shortener service behavior."""

    def __init__(self, base_url: str = "http://localhost:3000"):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.test_results = []

    def print_header(self, text: str):
        """Print a formatted header."""
        print(f"\n{'='*60}")
        print(f"  {text}")
        print(f"{'='*60}\n")

    def print_test(self, name: str, passed: bool, details: str = ""):
        """Print test result."""
        status = "✅ PASS" if passed else "❌ FAIL"
        self.test_results.append((name, passed))
        print(f"{status} - {name}")
        if details:
            print(f"       {details}")

    def test_list_links(self) -> bool:
        """GET /links answers with a JSON object."""
        try:
            response = self.session.get(f"{self.base_url}/links", timeout=5)
            ok = response.status_code == 200 and isinstance(response.json(), dict)
            details = f"Links stored: {len(response.json())}" if ok else f"Status: {response.status_code}"
            self.print_test("List Links", ok, details)
            return ok
        except Exception as e:
            self.print_test("List Links", False, f"Error: {str(e)}")
            return False

    def test_create_short_url(self) -> Optional[str]:
        """POST /shorten without a code returns a generated one."""
        try:
            test_url = f"https://example.com/test/{int(time.time())}"
            response = self.session.post(
                f"{self.base_url}/shorten",
                json={"url": test_url},
                timeout=5
            )

            if response.status_code == 200:
                data = response.json()
                short_code = data.get("shortCode")
                if data.get("success") and short_code:
                    self.print_test("Create Short URL", True, f"Code: {short_code}")
                    return short_code

            self.print_test("Create Short URL", False, f"Status: {response.status_code}")
            return None
        except Exception as e:
            self.print_test("Create Short URL", False, f"Error: {str(e)}")
            return None

    def test_redirect(self, short_code: str) -> bool:
        """GET /<code> redirects with 302."""
        try:
            response = self.session.get(
                f"{self.base_url}/{short_code}",
                allow_redirects=False,
                timeout=5
            )

            is_redirect = response.status_code == 302
            location = response.headers.get("Location", "")
            self.print_test(
                "URL Redirect",
                is_redirect,
                f"Redirects to: {location[:50]}..." if location else "No Location header"
            )
            return is_redirect
        except Exception as e:
            self.print_test("URL Redirect", False, f"Error: {str(e)}")
            return False

    def test_duplicate_code(self) -> bool:
        """Reusing a short code is rejected with 400."""
        try:
            short_code = f"test{int(time.time())}"
            first = self.session.post(
                f"{self.base_url}/shorten",
                json={"url": "https://example.com/custom", "shortCode": short_code},
                timeout=5
            )
            second = self.session.post(
                f"{self.base_url}/shorten",
                json={"url": "https://different-url.com", "shortCode": short_code},
                timeout=5
            )

            ok = first.status_code == 200 and second.status_code == 400
            self.print_test(
                "Duplicate Code Rejection",
                ok,
                f"Status: {first.status_code}, {second.status_code} (expected 200, 400)"
            )
            return ok
        except Exception as e:
            self.print_test("Duplicate Code Rejection", False, f"Error: {str(e)}")
            return False

    def test_missing_url(self) -> bool:
        """POST /shorten without a URL is rejected with 400."""
        try:
            response = self.session.post(f"{self.base_url}/shorten", json={}, timeout=5)
            ok = response.status_code == 400
            self.print_test("Missing URL Rejection", ok, f"Status: {response.status_code} (expected 400)")
            return ok
        except Exception as e:
            self.print_test("Missing URL Rejection", False, f"Error: {str(e)}")
            return False

    def test_nonexistent_code(self) -> bool:
        """Unknown codes answer 404."""
        try:
            response = self.session.get(
                f"{self.base_url}/nonexistent{int(time.time())}",
                allow_redirects=False,
                timeout=5
            )
            ok = response.status_code == 404
            self.print_test("Non-existent Code", ok, f"Status: {response.status_code} (expected 404)")
            return ok
        except Exception as e:
            self.print_test("Non-existent Code", False, f"Error: {str(e)}")
            return False

    def run_all_tests(self) -> bool:
        """Run all validation tests."""
        self.print_header("Link Shortener Service Validation")
        print(f"Testing service at: {self.base_url}")
        print(f"Timestamp: {datetime.now().isoformat()}\n")

        if not self.test_list_links():
            print("\n❌ /links failed. Service may not be running.")
            print(f"   Make sure the service is accessible at {self.base_url}")
            return False

        print()

        short_code = self.test_create_short_url()
        if short_code:
            self.test_redirect(short_code)

        print()

        self.test_duplicate_code()
        self.test_missing_url()
        self.test_nonexistent_code()

        self.print_summary()

        return all(passed for _, passed in self.test_results)

    def print_summary(self):
        """Print test summary."""
        total = len(self.test_results)
        passed = sum(1 for _, p in self.test_results if p)
        failed = total - passed

        self.print_header("Test Summary")
        print(f"Total Tests:  {total}")
        print(f"✅ Passed:     {passed}")
        print(f"❌ Failed:     {failed}")

        if failed > 0:
            print("\n⚠️  Failed tests:")
            for name, passed in self.test_results:
                if not passed:
                    print(f"   - {name}")

        print()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate link shortener service behavior"
    )
    parser.add_argument(
        "--url",
        default="http://localhost:3000",
        help="Base URL of the service (default: http://localhost:3000)"
    )

    args = parser.parse_args()

    validator = ServiceValidator(args.url)

    try:
        success = validator.run_all_tests()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\n⚠️  Validation interrupted by user")
        sys.exit(2)


if __name__ == "__main__":
    main()
