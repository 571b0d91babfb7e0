import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render

from .forms import ProfileForm
from .models import Profile

logger = logging.getLogger(__name__)


@login_required
def edit_profile(request):
    profile = Profile.for_user(request.user)
    if request.method == "POST":
        form = ProfileForm(request.POST, instance=profile)
        if form.is_valid():
            form.save()
            logger.info("Payment details updated for user %s", request.user.pk)
            messages.success(request, "Your account has been updated.")
            return redirect("accounts:edit_profile")
    else:
        form = ProfileForm(instance=profile)

    return render(request, "accounts/edit_profile.html", {"form": form, "profile": profile})
