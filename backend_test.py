#!/usr/bin/env python3
"""
Songsmith Backend API Smoke Suite
Exercises the generation, arrangement, genre and health endpoints of a running server
"""

import requests
import sys
from typing import Dict, Optional

class SongsmithAPITester:
    def __init__(self, base_url: str = "http://localhost:5000"):
        self.base_url = base_url
        self.seed = "smoke|2:30|city lights"
        self.first_song = None

        # Test results tracking
        self.tests_run = 0
        self.tests_passed = 0
        self.failed_tests = []
        self.passed_tests = []

    def log_test(self, name: str, success: bool, details: str = ""):
        """Log test results"""
        self.tests_run += 1
        if success:
            self.tests_passed += 1
            self.passed_tests.append(name)
            print(f"✅ {name} - PASSED")
        else:
            self.failed_tests.append({"test": name, "details": details})
            print(f"❌ {name} - FAILED: {details}")

    def make_request(self, method: str, endpoint: str, data: Optional[Dict] = None,
                    expected_status: int = 200, params: Optional[Dict] = None,
                    raw_body: Optional[str] = None) -> tuple[bool, Dict]:
        """Make HTTP request and validate response"""
        url = f"{self.base_url}/api/{endpoint}"
        headers = {'Content-Type': 'application/json'}

        try:
            if method == 'GET':
                response = requests.get(url, headers=headers, params=params)
            elif method == 'POST':
                if raw_body is not None:
                    response = requests.post(url, headers=headers, data=raw_body)
                else:
                    response = requests.post(url, headers=headers, json=data)
            else:
                return False, {"error": f"Unsupported method: {method}"}

            success = response.status_code == expected_status

            try:
                response_data = response.json()
            except ValueError:
                response_data = {"status_code": response.status_code, "text": response.text}

            if not success:
                print(f"   Expected status {expected_status}, got {response.status_code}")
                print(f"   Response: {response_data}")

            return success, response_data

        except requests.RequestException as e:
            print(f"   Request failed with exception: {str(e)}")
            return False, {"error": str(e)}

    def test_health_check(self):
        """Test health endpoint"""
        print("\n🔍 Testing Health Endpoint...")

        success, data = self.make_request('GET', 'health', expected_status=200)
        self.log_test("Health check (/api/health)", success and data == {"ok": True},
                     "" if success else f"Response: {data}")

    def test_get_genres(self):
        """Test get genres endpoint"""
        print("\n🔍 Testing Get Genres...")

        success, data = self.make_request('GET', 'genres', expected_status=200)

        if success and 'genres' in data and isinstance(data['genres'], list) and len(data['genres']) > 0:
            first_genre = data['genres'][0]
            if 'id' in first_genre and 'name' in first_genre and 'description' in first_genre:
                self.log_test("Get genres", True)
            else:
                self.log_test("Get genres", False,
                             f"Genre missing required fields: {first_genre}")
        else:
            self.log_test("Get genres", False,
                         f"Invalid genres response: {data}")

    def test_generate_songs(self):
        """Test seeded generation and replay"""
        print("\n🔍 Testing Song Generation...")

        payload = {"genre": "pop", "duration": "2:30", "prompt": "city lights",
                   "count": 3, "seed": self.seed}
        success, data = self.make_request('POST', 'generate', payload, expected_status=200)

        if success and len(data.get('songs', [])) == 3:
            self.first_song = data['songs'][0]
            self.log_test("Generate songs", True)
        else:
            self.log_test("Generate songs", False, f"Unexpected batch: {data}")
            return

        success, replay = self.make_request('POST', 'generate', payload, expected_status=200)
        same = success and [(s['title'], s['lyrics']) for s in replay['songs']] == \
            [(s['title'], s['lyrics']) for s in data['songs']]
        self.log_test("Replay with same seed", same,
                     "" if same else "Titles or lyrics changed between calls")

    def test_generate_from_query(self):
        """Test GET generation with clamped count"""
        print("\n🔍 Testing Query-String Generation...")

        success, data = self.make_request('GET', 'generate', expected_status=200,
                                        params={"genre": "rock", "count": 50})
        ok = success and len(data.get('songs', [])) == 10
        self.log_test("Generate via query string (count clamped)", ok,
                     "" if ok else f"Unexpected batch: {data}")

    def test_arrangement(self):
        """Test arrangement derivation for a generated song"""
        print("\n🔍 Testing Arrangement...")

        if not self.first_song:
            self.log_test("Build arrangement", False, "No generated song available")
            return

        payload = {"lyrics": self.first_song['lyrics'], "seed": self.seed,
                   "bpm": 110, "include_cues": True}
        success, data = self.make_request('POST', 'arrangement', payload, expected_status=200)

        if success and data.get('bpm') == 110 and data.get('events') and data.get('cues'):
            self.log_test("Build arrangement", True)
        else:
            self.log_test("Build arrangement", False, f"Unexpected arrangement: {data}")

    def test_malformed_request(self):
        """Test that malformed bodies are rejected with 400"""
        print("\n🔍 Testing Malformed Request...")

        success, data = self.make_request('POST', 'generate', raw_body="{not json",
                                        expected_status=400)
        ok = success and data.get('error') == "Invalid request"
        self.log_test("Malformed body rejected", ok,
                     "" if ok else f"Should return 400, got: {data}")

    def run_all_tests(self):
        """Run all test suites"""
        print("🚀 Starting Songsmith Backend API Tests")
        print(f"📍 Testing against: {self.base_url}")
        print("=" * 60)

        self.test_health_check()
        self.test_get_genres()
        self.test_generate_songs()
        self.test_generate_from_query()
        self.test_arrangement()
        self.test_malformed_request()

        # Print summary
        print("\n" + "=" * 60)
        print("📊 TEST SUMMARY")
        print("=" * 60)
        print(f"Total Tests: {self.tests_run}")
        print(f"Passed: {self.tests_passed}")
        print(f"Failed: {len(self.failed_tests)}")
        print(f"Success Rate: {(self.tests_passed/self.tests_run*100):.1f}%")

        if self.failed_tests:
            print("\n❌ FAILED TESTS:")
            for test in self.failed_tests:
                print(f"  • {test['test']}: {test['details']}")

        if self.passed_tests:
            print(f"\n✅ PASSED TESTS ({len(self.passed_tests)}):")
            for test in self.passed_tests:
                print(f"  • {test}")

        return len(self.failed_tests) == 0

def main():
    """Main test runner"""
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000"
    tester = SongsmithAPITester(base_url)
    success = tester.run_all_tests()

    return 0 if success else 1

if __name__ == "__main__":
    sys.exit(main())
