import unittest
from otp_tools.provisioning import provisioning_uri, qr_code_url, ErrorCorrectionLevel


SECRET = "I3VFM3JKMNDJCDH5BMBEEQAW6KJ6NOE3"


class TestProvisioning(unittest.TestCase):

    def test_uri(self):
        assert provisioning_uri(SECRET, "alice", "ACME") == f"otpauth://totp/alice?secret={SECRET}&issuer=ACME"

    def test_uri_encoding(self):
        uri = provisioning_uri(SECRET, "ACME:alice@example.com", "ACME Co & Sons")
        assert uri == f"otpauth://totp/ACME%3Aalice%40example.com?secret={SECRET}&issuer=ACME%20Co%20%26%20Sons"
        assert provisioning_uri(SECRET, "a/b?c=d#e", "x-y_z.~") == f"otpauth://totp/a%2Fb%3Fc%3Dd%23e?secret={SECRET}&issuer=x-y_z.~"
        assert provisioning_uri(SECRET, "élise", "i") == f"otpauth://totp/%C3%A9lise?secret={SECRET}&issuer=i"

    def test_levels(self):
        assert [level.value for level in ErrorCorrectionLevel] == ["L", "M", "Q", "H"]
        assert ErrorCorrectionLevel("Q") is ErrorCorrectionLevel.QUARTILE

    def test_qr_code_url(self):
        uri = provisioning_uri("S" * 16, "a", "b")
        url = qr_code_url(uri)
        assert url == "https://chart.googleapis.com/chart?chs=200x200&chld=M|0&cht=qr&chl=otpauth%3A%2F%2Ftotp%2Fa%3Fsecret%3DSSSSSSSSSSSSSSSS%26issuer%3Db"
        assert qr_code_url(uri, 0, 0) == url
        assert qr_code_url(uri, 300, 250, ErrorCorrectionLevel.HIGH).startswith("https://chart.googleapis.com/chart?chs=300x250&chld=H|0&")
        assert "chld=L|0" in qr_code_url(uri, level="L")


if __name__ == "__main__":
    unittest.main()
