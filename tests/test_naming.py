import unittest

from config_overlay.naming import derive_env_name, split_camel_case


class DeriveEnvNameTests(unittest.TestCase):
    def test_pascal_case(self) -> None:
        self.assertEqual(derive_env_name("AppName"), "APP_NAME")
        self.assertEqual(derive_env_name("MaxRetryCount"), "MAX_RETRY_COUNT")

    def test_camel_case(self) -> None:
        self.assertEqual(derive_env_name("maxRetryCount"), "MAX_RETRY_COUNT")

    def test_all_caps_token_is_not_split(self) -> None:
        self.assertEqual(derive_env_name("ID"), "ID")
        self.assertEqual(derive_env_name("UserID"), "USER_ID")

    def test_acronym_followed_by_word(self) -> None:
        self.assertEqual(derive_env_name("PDFLoader"), "PDF_LOADER")
        self.assertEqual(derive_env_name("HTTPPort"), "HTTP_PORT")

    def test_digits_form_their_own_word(self) -> None:
        self.assertEqual(derive_env_name("GL11Version"), "GL_11_VERSION")
        self.assertEqual(derive_env_name("BadUTF8"), "BAD_UTF_8")
        self.assertEqual(derive_env_name("April2019"), "APRIL_2019")

    def test_snake_case_underscores_are_delimiters(self) -> None:
        self.assertEqual(derive_env_name("log_level"), "LOG_LEVEL")
        self.assertEqual(derive_env_name("max_retry_count"), "MAX_RETRY_COUNT")
        self.assertEqual(derive_env_name("_private"), "PRIVATE")

    def test_single_character(self) -> None:
        self.assertEqual(derive_env_name("a"), "A")
        self.assertEqual(derive_env_name("A"), "A")

    def test_empty(self) -> None:
        self.assertEqual(derive_env_name(""), "")
        self.assertEqual(split_camel_case(""), [])


class SplitCamelCaseTests(unittest.TestCase):
    def test_words_keep_original_case(self) -> None:
        self.assertEqual(split_camel_case("MyFieldName"), ["My", "Field", "Name"])
        self.assertEqual(split_camel_case("lowercase"), ["lowercase"])

    def test_other_characters_are_dropped(self) -> None:
        self.assertEqual(split_camel_case("Hello World"), ["Hello", "World"])
        self.assertEqual(split_camel_case("a__b"), ["a", "b"])


if __name__ == "__main__":
    unittest.main()
