from flask import Blueprint, render_template, request, flash, redirect, url_for
from flask_login import login_user, logout_user, login_required

from craftsymphony.auth import AdminUser, check_admin_password

auth_bp = Blueprint('auth', __name__, url_prefix='/admin')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        if check_admin_password(request.form.get('password', '')):
            login_user(AdminUser())
            target = request.args.get('next') or ''
            # only same-site relative targets
            if not target.startswith('/') or target.startswith('//'):
                target = url_for('dashboard.panel')
            return redirect(target)
        flash('Nieprawidłowe hasło', 'error')

    return render_template('auth/login.html')


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return redirect(url_for('public.home'))
