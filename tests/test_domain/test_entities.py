from datetime import datetime, timedelta

import pytest

from tradeconnect.domain.entities.category import Category
from tradeconnect.domain.entities.inquiry import Inquiry
from tradeconnect.domain.entities.product import Product
from tradeconnect.domain.entities.supplier import SupplierProfile
from tradeconnect.domain.entities.user import User
from tradeconnect.domain.enums import (
    InquiryApprovalStatus,
    InquiryStatus,
    ProductStatus,
    SupplierStatus,
    UserRole,
)
from tradeconnect.domain.events.product_events import ProductApproved, ProductSubmitted
from tradeconnect.domain.events.supplier_events import SupplierApproved, SupplierRestored
from tradeconnect.domain.events.user_events import UserApproved
from tradeconnect.domain.exceptions import DomainValidationError, InvalidTransitionError

AGREEMENTS = {"agrees_to_terms": True, "agrees_to_privacy": True, "declares_info_accurate": True}


def onboarded_supplier():
    supplier = SupplierProfile(id=1, user_id=10, company_name="Company 10")
    supplier.submit_onboarding({"company_name": "Silk Road Textiles", **AGREEMENTS})
    return supplier


class TestSupplierProfile:

    def test_onboarding_enters_review_queue(self):
        """Test submitting onboarding completes the wizard and waits for review."""
        supplier = onboarded_supplier()

        assert supplier.status == SupplierStatus.PENDING_APPROVAL
        assert supplier.onboarding_completed is True
        assert supplier.verified is False
        assert supplier.company_name == "Silk Road Textiles"
        assert supplier.profile_draft_data is None

    def test_onboarding_requires_agreements(self):
        """Test onboarding is refused until every declaration is accepted."""
        supplier = SupplierProfile(id=1, user_id=10, company_name="Company 10")

        with pytest.raises(DomainValidationError):
            supplier.submit_onboarding({"company_name": "Acme", "agrees_to_terms": True})
        assert supplier.onboarding_completed is False

    def test_approve_verifies_and_emits_event(self):
        """Test approval activates and verifies the supplier."""
        supplier = onboarded_supplier()
        supplier.approve()

        assert supplier.status == SupplierStatus.ACTIVE
        assert supplier.verified is True
        assert supplier.get_events() == [SupplierApproved(supplier_id=1, user_id=10)]
        assert supplier.get_events() == []

    def test_reject_then_restore_clears_rejection(self):
        """Test a restored supplier is back in review with no rejection metadata."""
        supplier = onboarded_supplier()
        supplier.reject(admin_id=99, reason="Missing business license")
        assert supplier.status == SupplierStatus.REJECTED
        assert supplier.rejection_reason == "Missing business license"

        supplier.restore()

        assert supplier.status == SupplierStatus.PENDING_APPROVAL
        assert supplier.verified is False
        assert supplier.rejected_by is None
        assert supplier.rejected_at is None
        assert supplier.rejection_reason is None
        assert isinstance(supplier.get_events()[-1], SupplierRestored)

    def test_suspend_requires_active(self):
        """Test a supplier still in review cannot be suspended."""
        supplier = onboarded_supplier()

        with pytest.raises(InvalidTransitionError):
            supplier.suspend(admin_id=99, reason="Fraud report")
        assert supplier.status == SupplierStatus.PENDING_APPROVAL
        assert supplier.suspension_reason is None

    def test_activate_twice_is_a_no_op(self):
        """Test a second activate changes nothing and emits nothing."""
        supplier = onboarded_supplier()
        supplier.approve()
        supplier.suspend(admin_id=99, reason="Fraud report")
        supplier.activate()
        supplier.get_events()

        supplier.activate()

        assert supplier.status == SupplierStatus.ACTIVE
        assert supplier.suspension_reason is None
        assert supplier.get_events() == []

    def test_deleted_supplier_is_never_verified(self):
        """Test deleting an approved supplier drops its verification."""
        supplier = onboarded_supplier()
        supplier.approve()
        supplier.delete(admin_id=99)

        assert supplier.status == SupplierStatus.DELETED
        assert supplier.verified is False
        assert supplier.hides_products is True
        assert supplier.available_actions == []

    def test_update_details_ignores_moderation_fields(self):
        """Test profile edits cannot change status or verification."""
        supplier = onboarded_supplier()
        supplier.update_details({"status": "active", "verified": True, "location": "Samarkand"})

        assert supplier.status == SupplierStatus.PENDING_APPROVAL
        assert supplier.verified is False
        assert supplier.location == "Samarkand"


class TestProduct:

    def test_create_pending_emits_submission(self):
        """Test a non-draft product is submitted for review."""
        product = Product.create(supplier_id=3, data={"name": "Raw silk", "price": 10.0})
        product.id = 7
        product.record_creation()

        assert product.status == ProductStatus.PENDING
        assert product.get_events() == [ProductSubmitted(product_id=7, supplier_id=3, name="Raw silk")]

    def test_draft_is_silent_until_published(self):
        """Test drafts do not reach the review queue before publishing."""
        product = Product.create(supplier_id=3, data={"name": "Raw silk"}, as_draft=True)
        product.id = 7
        product.record_creation()
        assert product.get_events() == []

        product.publish()

        assert product.status == ProductStatus.PENDING
        assert isinstance(product.get_events()[0], ProductSubmitted)

    def test_edit_of_approved_product_requires_new_review(self):
        """Test editing approved content sends it back to pending."""
        product = Product(id=1, supplier_id=3, name="Raw silk")
        product.approve(admin_id=99, notes="Looks good")
        assert isinstance(product.get_events()[0], ProductApproved)

        product.edit({"price": 11.0})

        assert product.status == ProductStatus.PENDING
        assert product.price == 11.0

    def test_edit_of_deleted_product_is_refused(self):
        """Test deleted products cannot be edited."""
        product = Product(id=1, supplier_id=3, name="Raw silk", status=ProductStatus.DELETED)

        with pytest.raises(InvalidTransitionError):
            product.edit({"name": "Silk"})
        assert product.name == "Raw silk"

    def test_suspend_and_unsuspend(self):
        """Test suspension metadata is set and cleared."""
        product = Product(id=1, supplier_id=3, name="Raw silk", status=ProductStatus.APPROVED)
        product.suspend(admin_id=99, reason="Counterfeit")
        assert product.suspension_reason == "Counterfeit"

        product.unsuspend()

        assert product.status == ProductStatus.APPROVED
        assert product.suspended_by is None
        assert product.suspension_reason is None

    def test_restore_clears_rejection(self):
        """Test restoring a rejected product records who restored it."""
        product = Product(id=1, supplier_id=3, name="Raw silk")
        product.reject(admin_id=99, reason="Blurry photos")
        product.restore(admin_id=98)

        assert product.status == ProductStatus.PENDING
        assert product.rejection_reason is None
        assert product.restored_by == 98
        assert product.restored_at is not None

    def test_soft_delete_then_recover(self):
        """Test recovered products go back to review."""
        product = Product(id=1, supplier_id=3, name="Raw silk", status=ProductStatus.APPROVED)
        product.soft_delete(actor_id=10)
        assert product.deleted_by == 10

        product.recover()

        assert product.status == ProductStatus.PENDING
        assert product.deleted_at is None

    def test_available_actions(self):
        """Test the actions offered for a pending product."""
        product = Product(id=1, supplier_id=3, name="Raw silk")
        assert set(product.available_actions) == {"approve", "reject", "soft_delete", "edit"}


class TestInquiry:

    def make(self, **overrides):
        fields = dict(id=5, buyer_id=1, supplier_id=2, subject="Bulk order", message="500 metres")
        fields.update(overrides)
        return Inquiry(**fields)

    def test_reply_needs_admin_approval(self):
        """Test no one can reply before the admin approves."""
        inquiry = self.make()

        with pytest.raises(InvalidTransitionError):
            inquiry.reply_as_supplier("We can ship next week")
        assert inquiry.status == InquiryStatus.PENDING

    def test_supplier_reply_marks_replied(self):
        """Test an approved inquiry becomes replied once the supplier answers."""
        inquiry = self.make()
        inquiry.approve(admin_id=99)
        inquiry.reply_as_supplier("We can ship next week")

        assert inquiry.status == InquiryStatus.REPLIED
        assert inquiry.supplier_reply == "We can ship next week"
        assert inquiry.replied_at is not None

    def test_approve_clears_buyer_reply(self):
        """Test re-approving a rejected inquiry drops the buyer follow-up."""
        inquiry = self.make(
            admin_approval_status=InquiryApprovalStatus.REJECTED,
            buyer_reply="Any update?",
            buyer_replied_at=datetime.utcnow(),
        )
        inquiry.approve(admin_id=99)

        assert inquiry.buyer_reply is None
        assert inquiry.buyer_replied_at is None

    def test_reject_clears_buyer_reply(self):
        """Test rejecting an approved inquiry drops the buyer follow-up."""
        inquiry = self.make(
            admin_approval_status=InquiryApprovalStatus.APPROVED,
            buyer_reply="Any update?",
            buyer_replied_at=datetime.utcnow(),
        )
        inquiry.reject("Spam")

        assert inquiry.buyer_reply is None
        assert inquiry.buyer_replied_at is None

    def test_reject_requires_reason(self):
        """Test a blank rejection reason is refused."""
        inquiry = self.make()
        with pytest.raises(DomainValidationError):
            inquiry.reject("   ")
        assert inquiry.admin_approval_status == InquiryApprovalStatus.PENDING

    def test_reject_after_approve_clears_approver(self):
        """Test overturning an approval removes the approval metadata."""
        inquiry = self.make()
        inquiry.approve(admin_id=99)
        inquiry.reject("Off-platform contact details")

        assert inquiry.admin_approval_status == InquiryApprovalStatus.REJECTED
        assert inquiry.approved_by is None
        assert inquiry.rejection_reason == "Off-platform contact details"

    def test_recover_restores_conversation_status(self):
        """Test recovery returns to replied when the supplier had answered."""
        answered = self.make()
        answered.approve(admin_id=99)
        answered.reply_as_supplier("Yes")
        answered.delete()
        answered.recover()
        assert answered.status == InquiryStatus.REPLIED

        unanswered = self.make()
        unanswered.delete()
        unanswered.recover()
        assert unanswered.status == InquiryStatus.PENDING


class TestUser:

    def test_verify_email_approves(self):
        """Test email verification also approves the account."""
        user = User.create("Owner@Example.com", "hash", UserRole.BUYER)
        user.id = 4
        user.verify_email()

        assert user.email == "owner@example.com"
        assert user.email_verified is True
        assert user.approved is True
        assert user.email_verification_token is None
        assert user.get_events() == [UserApproved(user_id=4, role=UserRole.BUYER)]

    def test_expired_verification_token(self):
        """Test an expired token is refused."""
        user = User.create("owner@example.com", "hash", UserRole.BUYER)
        user.email_verification_expires = datetime.utcnow() - timedelta(minutes=1)

        with pytest.raises(DomainValidationError):
            user.verify_email()
        assert user.email_verified is False

    def test_reset_password_needs_live_token(self):
        """Test a reset without an issued token is refused."""
        user = User.create("owner@example.com", "hash", UserRole.BUYER)
        with pytest.raises(DomainValidationError):
            user.reset_password("new-hash")

        user.issue_password_reset_token()
        user.reset_password("new-hash")
        assert user.password_hash == "new-hash"
        assert user.password_reset_token is None


class TestCategory:

    def test_counter_never_goes_negative(self):
        """Test decrementing an empty category keeps zero."""
        category = Category(name="Textiles")
        category.decrement_product_count()
        assert category.product_count == 0

    def test_cannot_parent_itself(self):
        """Test a category cannot be its own parent."""
        category = Category(id=3, name="Textiles")
        with pytest.raises(DomainValidationError):
            category.update_details({"parent_id": 3})
