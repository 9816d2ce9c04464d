
# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import asyncio
import re
import unittest

from resume_parser.extractor import (
    InvalidInputError,
    extract_from_document,
    extract_resume_data,
    extract_resume_data_async,
)
from resume_parser.models import (
    ContactInfo,
    EducationSection,
    ExperienceSection,
    RawDocument,
    ResumeData,
    SkillsResult,
)

SAMPLE = """
Jane Doe
Senior Software Engineer
jane.doe@example.com | 415-555-0199
linkedin.com/in/janedoe | github.com/janedoe | janedoe.dev

Professional Summary
Backend engineer focused on Python services and AWS infrastructure.

Work Experience
Acme Corp 2019 - 2021
Built payment APIs
Mentored two engineers

Education
Bachelor of Science, 2016
"""

class TestExtractResumeData(unittest.TestCase):
    def test_full_resume(self):
        data = extract_resume_data(SAMPLE)

        self.assertEqual(data.contact.name, "Jane Doe")
        self.assertEqual(data.contact.email, "jane.doe@example.com")
        self.assertIn("4155550199", re.sub(r"\D", "", data.contact.phone))
        self.assertEqual(data.contact.linkedin, "https://linkedin.com/in/janedoe")
        self.assertEqual(data.contact.github, "https://github.com/janedoe")
        self.assertEqual(data.contact.website, "janedoe.dev")

        self.assertIn("python", data.skills.categorized["programming"])
        self.assertIn("aws", data.skills.categorized["cloud"])

        self.assertEqual(data.experience.count, 1)
        self.assertEqual(data.experience.parsed[0].duration, "2019 - 2021")
        self.assertEqual(len(data.experience.parsed[0].description), 2)

        self.assertEqual(data.education.count, 1)
        self.assertEqual(data.education.parsed[0].year, "2016")

        self.assertEqual(data.summary, "Backend engineer focused on Python services and AWS infrastructure.")

    def test_never_fails_on_text(self):
        samples = ["", " ", "\n\n\n", "\x00\x01", "🙂 ünïcödé", "2019 2020 2021", "@@@...///", "a" * 5000]
        for sample in samples:
            with self.subTest(sample=sample[:20]):
                data = extract_resume_data(sample)
                self.assertIsInstance(data, ResumeData)
                self.assertIsInstance(data.contact, ContactInfo)
                self.assertIsInstance(data.skills, SkillsResult)
                self.assertIsInstance(data.experience, ExperienceSection)
                self.assertIsInstance(data.education, EducationSection)
                self.assertTrue(data.summary is None or isinstance(data.summary, str))
                self.assertEqual(data.skills.count, len(data.skills.all))

    def test_empty_text_defaults(self):
        data = extract_resume_data("")
        self.assertEqual(data.contact, ContactInfo())
        self.assertEqual(data.skills.count, 0)
        self.assertEqual(data.experience.count, 0)
        self.assertEqual(data.education.count, 0)
        self.assertIsNone(data.summary)

    def test_no_summary_heading(self):
        self.assertIsNone(extract_resume_data("Jane Doe\nWork Experience\nAcme Corp 2020").summary)

    def test_education_dates_are_not_a_phone(self):
        data = extract_resume_data("Jane Doe\nEducation\nBachelor of Science 2012-2016")
        self.assertIsNone(data.contact.phone)
        self.assertEqual(data.education.parsed[0].year, "2016")

    def test_links_fill_contact(self):
        data = extract_resume_data("Jane Doe", links=["https://github.com/janedoe"])
        self.assertEqual(data.contact.github, "https://github.com/janedoe")

    def test_result_cannot_be_modified(self):
        data = extract_resume_data(SAMPLE)
        self.assertIsInstance(data.experience.raw, tuple)
        self.assertIsInstance(data.experience.parsed[0].description, tuple)
        self.assertIsInstance(data.education.parsed, tuple)
        self.assertIsInstance(data.skills.all, tuple)
        with self.assertRaises(AttributeError):
            data.experience.raw.append("Injected line")
        with self.assertRaises(TypeError):
            data.skills.categorized["programming"] = ("cobol",)
        self.assertEqual(extract_resume_data(SAMPLE), data)

    def test_to_dict_shape(self):
        payload = extract_resume_data(SAMPLE).to_dict()
        self.assertEqual(set(payload), {"contact", "skills", "experience", "education", "summary"})
        job = payload["experience"]["parsed"][0]
        self.assertEqual(job["rawLine"], "Acme Corp 2019 - 2021")
        self.assertEqual(set(job), {"title", "company", "duration", "description", "rawLine"})
        self.assertEqual(payload["skills"]["count"], len(payload["skills"]["all"]))
        self.assertEqual(payload["education"]["parsed"][0]["institution"], None)

class TestInvalidInput(unittest.TestCase):
    def test_non_string_text(self):
        for bad in (None, b"bytes", 42, ["Jane Doe"]):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInputError):
                    extract_resume_data(bad)

    def test_links_must_be_strings(self):
        with self.assertRaises(InvalidInputError):
            extract_resume_data("Jane Doe", links="https://janedoe.dev")
        with self.assertRaises(InvalidInputError):
            extract_resume_data("Jane Doe", links=[None])
        with self.assertRaises(InvalidInputError):
            extract_resume_data("Jane Doe", links=42)

    def test_is_a_type_error(self):
        self.assertTrue(issubclass(InvalidInputError, TypeError))

class TestEntryPoints(unittest.TestCase):
    def test_from_document(self):
        document = RawDocument(text="Jane Doe", links=["mailto:jane@example.com"])
        data = extract_from_document(document)
        self.assertEqual(data.contact.email, "jane@example.com")

    def test_async(self):
        data = asyncio.run(extract_resume_data_async(SAMPLE))
        self.assertEqual(data, extract_resume_data(SAMPLE))

if __name__ == '__main__':
    unittest.main()
