"""Constants shared by the test suite."""

TEST_ENDPOINT = "https://sps.example.com/api/xmlapi.do"
TEST_MERCHANT_ID = "30132"
TEST_SERVICE_ID = "103"
TEST_HASH_KEY = "c48e0e8b9e2c5c4f6e6a1b7b0a3e3f0d1c2b3a49"
