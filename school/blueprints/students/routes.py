from flask import render_template, request, redirect, url_for, abort, current_app
from ...extensions import db
from ...services import students as svc
from . import bp

def _flag(value):
    return value.lower() in ("1", "true", "yes")

@bp.get("/")
def index():
    listing = svc.list_students(
        db.session,
        sort_order=request.args.get("sort_order") or None,
        search_string=request.args.get("search_string"),
        current_filter=request.args.get("current_filter") or None,
        page=request.args.get("page", type=int),
        page_size=current_app.config["STUDENTS_PAGE_SIZE"],
    )
    return render_template("students/index.html", listing=listing)

@bp.get("/details", defaults={"student_id": None})
@bp.get("/details/<int:student_id>")
def details(student_id):
    student = svc.get_student_detail(db.session, student_id)
    if student is None:
        abort(404)
    return render_template("students/details.html", student=student)

@bp.route("/create", methods=["GET", "POST"])
def create():
    if request.method == "GET":
        return render_template("students/create.html", form=svc.StudentForm())

    form = svc.create_student(db.session, request.form)
    if form.saved:
        return redirect(url_for("students.index"))
    return render_template("students/create.html", form=form)

@bp.get("/edit", defaults={"student_id": None})
@bp.get("/edit/<int:student_id>")
def edit(student_id):
    student = svc.load_student_for_edit(db.session, student_id)
    if student is None:
        abort(404)
    return render_template("students/edit.html", form=svc.StudentForm.from_student(student))

@bp.post("/edit", defaults={"student_id": None})
@bp.post("/edit/<int:student_id>")
def edit_post(student_id):
    form = svc.apply_student_edit(db.session, student_id, request.form)
    if form is None:
        abort(404)
    if form.saved:
        return redirect(url_for("students.index"))
    return render_template("students/edit.html", form=form)

@bp.get("/delete", defaults={"student_id": None})
@bp.get("/delete/<int:student_id>")
def delete(student_id):
    save_changes_error = request.args.get("save_changes_error", default=False, type=_flag)
    confirmation = svc.confirm_delete(db.session, student_id, save_changes_error)
    if confirmation is None:
        abort(404)
    return render_template("students/delete.html",
                           student=confirmation.student,
                           error_message=confirmation.error_message)

@bp.post("/delete/<int:student_id>")
def delete_confirmed(student_id):
    if svc.execute_delete(db.session, student_id):
        return redirect(url_for("students.index"))
    return redirect(url_for("students.delete", student_id=student_id, save_changes_error=True))
