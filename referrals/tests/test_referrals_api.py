"""Tests for referrals API"""
from datetime import timedelta
from unittest import mock

from django.core import mail
from django.utils import timezone

from rest_framework import status

from core.tests.base_test_class import BaseTest
from referrals.errors import NotificationError, StoreError, StoreUnavailableError
from referrals.models import Referral


class CreateReferralTest(BaseTest):

    def test_create_referral(self):
        """Test referral creation, referee gets an email"""
        response = self.post_referral()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, msg=response.content.decode())
        data = response.json()
        self.assertEqual(data['message'], 'Referral created successfully')
        self.assertDictContained(dict(self.referral_data, status='PENDING'), data['referral'])
        self.assertIn('createdAt', data['referral'])
        self.assertEqual(Referral.objects.count(), 1)
        self.assertEqual(len(mail.outbox), 1)
        email = mail.outbox[0]
        self.assertListEqual(email.to, ['bob@x.com'])
        self.assertEqual(email.subject, 'Alice has referred you to a course!')
        self.assertEqual(email.from_email, 'noreply@referearn.test')
        html_content = email.alternatives[0][0]
        self.assertIn('Hello Bob,', html_content)
        self.assertIn('Alice thinks you might be interested in our Go101 course.', html_content)
        self.assertIn('href="http://yourwebsite.com/courses/Go101"', html_content)

    def test_create_referral_trailing_slash(self):
        response = self.client.post(self.referrals_url + '/', data=self.referral_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, msg=response.content.decode())

    def test_create_referral_empty_field(self):
        """Test empty referrerEmail: nothing stored and no email"""
        response = self.post_referral(referrerEmail='')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, msg=response.content.decode())
        self.assertDictEqual(response.json(), {'error': 'All fields are required'})
        self.assertEqual(Referral.objects.count(), 0)
        self.assertEqual(len(mail.outbox), 0)

    def test_create_referral_missing_field(self):
        response = self.post_referral(course=None)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, msg=response.content.decode())
        self.assertDictEqual(response.json(), {'error': 'All fields are required'})
        self.assertEqual(Referral.objects.count(), 0)

    def test_create_referral_no_body(self):
        response = self.client.post(self.referrals_url, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, msg=response.content.decode())

    def test_create_referral_store_failure(self):
        with mock.patch.object(self.service.store, 'create', side_effect=StoreError('write rejected')):
            response = self.post_referral()
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR, msg=response.content.decode())
        self.assertDictEqual(response.json(), {'error': 'Failed to process referral'})
        self.assertEqual(len(mail.outbox), 0)

    def test_create_referral_newline_in_name(self):
        """A newline in referrerName can not go into the email subject; referral remains stored"""
        response = self.post_referral(referrerName='Alice\nSmith')
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR, msg=response.content.decode())
        self.assertDictEqual(response.json(), {'error': 'Failed to process referral'})
        self.assertEqual(Referral.objects.count(), 1)
        self.assertEqual(Referral.objects.get().referrer_name, 'Alice\nSmith')
        self.assertEqual(len(mail.outbox), 0)

    def test_create_referral_email_failure(self):
        """Email failure is reported as failure, but referral remains stored"""
        with mock.patch.object(self.service.sender, 'send', side_effect=NotificationError('smtp down')):
            response = self.post_referral()
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR, msg=response.content.decode())
        self.assertDictEqual(response.json(), {'error': 'Failed to process referral'})
        response = self.client.get(self.referrals_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK, msg=response.content.decode())
        self.assertEqual(len(response.json()), 1)
        self.assertEqual(response.json()[0]['refereeEmail'], 'bob@x.com')


class ReferralListTest(BaseTest):

    def setUp(self):
        super().setUp()
        now = timezone.now()
        for days, course in [(3, 'Go101'), (0, 'Py101'), (1, 'Rs101')]:
            referral = Referral.objects.create(referrer_name='Alice', referrer_email='alice@x.com',
                                               referee_name='Bob', referee_email='bob@x.com', course=course)
            Referral.objects.filter(pk=referral.pk).update(created_at=now - timedelta(days=days))

    def test_get_list(self):
        """Test getting referrals, most recent first"""
        response = self.client.get(self.referrals_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK, msg=response.content.decode())
        data = response.json()
        self.assertListEqual([item['course'] for item in data], ['Py101', 'Rs101', 'Go101'])
        self.assertSortedDesc(data, 'createdAt')
        self.assertTrue(all(item['status'] == 'PENDING' for item in data))

    def test_get_list_twice(self):
        first = self.client.get(self.referrals_url).json()
        second = self.client.get(self.referrals_url).json()
        self.assertListEqual(first, second)

    def test_get_list_store_failure(self):
        with mock.patch.object(self.service.store, 'list', side_effect=StoreUnavailableError('store down')):
            response = self.client.get(self.referrals_url)
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR, msg=response.content.decode())
        self.assertDictEqual(response.json(), {'error': 'Failed to fetch referrals'})
